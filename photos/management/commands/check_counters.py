"""Management command to compare denormalized counters against their source rows."""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Avg, Count

from photos.models import Comment, Follower, Like, Photo, Rating, User

RATING_TOLERANCE = 1e-6


def _counts(model, group_field, aggregate=None):
    """Return {group value: aggregate} for every group present in `model`."""
    aggregate = aggregate or Count("pk")
    rows = model.objects.values(group_field).annotate(result=aggregate).values_list(group_field, "result")
    return dict(rows)


class Command(BaseCommand):
    """Report (and optionally repair) drift in follow, like, comment and rating aggregates."""

    help = 'Checks cached counters against source rows; use --fix to rewrite drifted values'

    def add_arguments(self, parser):
        parser.add_argument("--fix", action="store_true", help="Rewrite counters that do not match.")

    def handle(self, *args, **options):
        fix = options.get("fix", False)
        with transaction.atomic():
            drift = self.check_users(fix) + self.check_photos(fix)
        if not drift:
            self.stdout.write(self.style.SUCCESS("All counters consistent."))
        elif fix:
            self.stdout.write(self.style.SUCCESS(f"Repaired {drift} drifted row(s)."))
        else:
            self.stdout.write(self.style.WARNING(f"Found {drift} drifted row(s); rerun with --fix to repair."))

    def _report(self, label, pk, actual):
        self.stdout.write(f"{label} {pk}: " + ", ".join(f"{field}={value}" for field, value in actual.items()))

    def check_users(self, fix):
        followers = _counts(Follower, "followed")
        following = _counts(Follower, "follower")
        drift = 0
        for user in User.objects.only("id", "followers_count", "following_count"):
            actual = {
                "followers_count": followers.get(user.id, 0),
                "following_count": following.get(user.id, 0),
            }
            if all(getattr(user, field) == value for field, value in actual.items()):
                continue
            drift += 1
            self._report("user", user.id, actual)
            if fix:
                User.objects.filter(pk=user.pk).update(**actual)
        return drift

    def check_photos(self, fix):
        likes = _counts(Like, "photo")
        comments = _counts(Comment, "photo")
        votes = _counts(Rating, "photo")
        means = _counts(Rating, "photo", Avg("value"))
        drift = 0
        for photo in Photo.objects.only("id", "likes_count", "comments_count", "votes_count", "rating"):
            actual = {
                "likes_count": likes.get(photo.id, 0),
                "comments_count": comments.get(photo.id, 0),
                "votes_count": votes.get(photo.id, 0),
            }
            mean = float(means.get(photo.id) or 0.0)
            if (
                all(getattr(photo, field) == value for field, value in actual.items())
                and abs(photo.rating - mean) < RATING_TOLERANCE
            ):
                continue
            actual["rating"] = mean
            drift += 1
            self._report("photo", photo.id, actual)
            if fix:
                Photo.objects.filter(pk=photo.pk).update(**actual)
        return drift
