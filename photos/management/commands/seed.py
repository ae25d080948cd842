"""Management command to seed the database with sample users, photos, and social activity."""

import re
from random import choice, randint, sample
from typing import List

from django.core.management.base import BaseCommand
from faker import Faker

from photos.models import Photo, User
from photos.repos.user_repo import UserRepo
from photos.services import EngagementService, FollowService, PhotoService, RatingService
from .seed_data import IMAGE_URL_TEMPLATE, bio_phrases, comment_phrases, outfit_titles, user_fixtures


class Command(BaseCommand):
    """Seed users, photos, follows, ratings, likes and comments.

    Activity goes through the services rather than bulk inserts so every
    denormalized counter and rating mean is consistent afterwards. The
    notification dispatcher is not used, so seeding produces no notifications.
    """
    USER_COUNT = 40
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total number of users to reach.")
        parser.add_argument("--photos-per-user", type=int, default=2)
        parser.add_argument("--follow-k", type=int, default=5, help="How many profiles each user follows.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.users = UserRepo()
        self.photos = PhotoService()
        self.follows = FollowService()
        self.ratings = RatingService()
        self.engagement = EngagementService()

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_follows(follow_k=options["follow_k"])
        self.seed_photos(per_user=options["photos_per_user"])
        self.seed_ratings(max_ratings_per_photo=10)
        self.seed_likes(max_likes_per_photo=10)
        self.seed_comments(max_comments_per_photo=3)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, target):
        """Create fixture users, then random users until `target` is reached."""
        for data in user_fixtures:
            self.create_user(data)
        attempts = 0
        while User.objects.count() < target and attempts < target * 5:
            attempts += 1
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            username = re.sub(r"\W", "", f"{first_name}{last_name}{randint(1, 999)}").lower()[:30]
            self.create_user({
                "username": username,
                "email": f"{username}@example.org",
                "first_name": first_name,
                "last_name": last_name,
            })
        self.stdout.write(f"users: {User.objects.count()}")

    def create_user(self, data):
        """Create a user with the default password unless the username is taken."""
        if User.objects.filter(username__iexact=data["username"]).exists():
            return None
        return User.objects.create_user(
            username=data["username"],
            email=data["email"],
            password=Command.DEFAULT_PASSWORD,
            first_name=data["first_name"],
            last_name=data["last_name"],
            display_name=f"{data['first_name']} {data['last_name']}",
            bio=choice(bio_phrases),
        )

    def seed_follows(self, follow_k: int = 5) -> None:
        """Each user follows up to `follow_k` random other users."""
        ids = self.users.list_ids()
        if len(ids) < 2:
            return
        k = max(0, min(follow_k, len(ids) - 1))
        created = 0
        for follower_id in ids:
            pool = [x for x in ids if x != follower_id]
            for followed_id in sample(pool, k):
                created += self.follows.follow(follower_id, followed_id)
        self.stdout.write(f"follows created: {created}")

    def seed_photos(self, *, per_user: int = 2) -> None:
        """Give every user `per_user` photos pointing at placeholder images."""
        created = 0
        for owner_id in self.users.list_ids():
            for _ in range(per_user):
                self.photos.create_photo(
                    owner_id,
                    choice(outfit_titles),
                    IMAGE_URL_TEMPLATE.format(seed=self.faker.uuid4()),
                    description=self.faker.sentence(nb_words=12),
                )
                created += 1
        self.stdout.write(f"photos created: {created}")

    def _random_raters(self, photo, users: List, maximum: int) -> List:
        pool = [u for u in users if u != photo.owner_id]
        return sample(pool, randint(0, min(maximum, len(pool))))

    def seed_ratings(self, max_ratings_per_photo: int = 10) -> None:
        """Rate photos with values skewed towards the upper half of the scale."""
        users = self.users.list_ids()
        count = 0
        for photo in Photo.objects.all():
            for user_id in self._random_raters(photo, users, max_ratings_per_photo):
                self.ratings.rate(user_id, photo.id, randint(4, 10))
                count += 1
        self.stdout.write(f"ratings created: {count}")

    def seed_likes(self, max_likes_per_photo: int = 10) -> None:
        users = self.users.list_ids()
        count = 0
        for photo in Photo.objects.all():
            for user_id in self._random_raters(photo, users, max_likes_per_photo):
                created, _ = self.engagement.like(user_id, photo.id)
                count += created
        self.stdout.write(f"likes created: {count}")

    def seed_comments(self, max_comments_per_photo: int = 3) -> None:
        users = self.users.list_ids()
        count = 0
        for photo in Photo.objects.all():
            for user_id in self._random_raters(photo, users, max_comments_per_photo):
                self.engagement.add_comment(user_id, photo.id, choice(comment_phrases))
                count += 1
        self.stdout.write(f"comments created: {count}")
