from django.db import IntegrityError, transaction
from django.test import TestCase

from photos.models import Comment, Follower, Like, Rating
from photos.tests.helpers import make_photo, make_user


class ModelConstraintTests(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")
        self.photo = make_photo(owner=self.bob)

    def test_one_rating_per_user_and_photo(self):
        Rating.objects.create(user=self.alice, photo=self.photo, value=7)
        with self.assertRaises(IntegrityError), transaction.atomic():
            Rating.objects.create(user=self.alice, photo=self.photo, value=3)

    def test_rating_value_must_be_in_range(self):
        for value in (0, 11):
            with self.assertRaises(IntegrityError), transaction.atomic():
                Rating.objects.create(user=self.alice, photo=self.photo, value=value)

    def test_one_like_per_user_and_photo(self):
        Like.objects.create(user=self.alice, photo=self.photo)
        with self.assertRaises(IntegrityError), transaction.atomic():
            Like.objects.create(user=self.alice, photo=self.photo)

    def test_follow_edge_is_unique(self):
        Follower.objects.create(follower=self.alice, followed=self.bob)
        with self.assertRaises(IntegrityError), transaction.atomic():
            Follower.objects.create(follower=self.alice, followed=self.bob)

    def test_self_follow_rejected_by_database(self):
        with self.assertRaises(IntegrityError), transaction.atomic():
            Follower.objects.create(follower=self.alice, followed=self.alice)

    def test_deleting_photo_cascades_to_engagement(self):
        Rating.objects.create(user=self.alice, photo=self.photo, value=5)
        Like.objects.create(user=self.alice, photo=self.photo)
        Comment.objects.create(user=self.alice, photo=self.photo, text="nice")
        self.photo.delete()
        self.assertFalse(Rating.objects.exists())
        self.assertFalse(Like.objects.exists())
        self.assertFalse(Comment.objects.exists())
