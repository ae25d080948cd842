from django.test import TestCase

from photos.models import Photo, User
from photos.services import counters
from photos.tests.helpers import make_photo, make_user


class CountersTests(TestCase):
    def setUp(self):
        self.user = make_user("alice")
        self.photo = make_photo(owner=self.user)

    def test_increment_and_decrement(self):
        counters.increment(Photo, self.photo.id, "likes_count")
        counters.increment(Photo, self.photo.id, "likes_count")
        counters.decrement(Photo, self.photo.id, "likes_count")
        self.assertEqual(counters.current(Photo, self.photo.id, "likes_count"), 1)

    def test_decrement_clamps_at_zero_and_logs(self):
        with self.assertLogs("photos.services.counters", level="WARNING") as logs:
            updated = counters.decrement(User, self.user.id, "followers_count")
        self.assertEqual(updated, 0)
        self.assertEqual(counters.current(User, self.user.id, "followers_count"), 0)
        self.assertIn("Counter inconsistency", logs.output[0])

    def test_current_reads_several_fields(self):
        self.assertEqual(counters.current(User, self.user.id, "followers_count", "following_count"), (0, 0))

    def test_current_for_missing_row_is_zero(self):
        missing = "00000000-0000-0000-0000-000000000000"
        self.assertEqual(counters.current(Photo, missing, "likes_count"), 0)
        self.assertEqual(counters.current(User, missing, "followers_count", "following_count"), (0, 0))
