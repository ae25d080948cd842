from django.test import TestCase

from photos.exceptions import NotFoundError, ValidationError
from photos.models import Follower
from photos.services import FollowService
from photos.tests.helpers import make_user


class FollowServiceTestCase(TestCase):
    def setUp(self):
        self.service = FollowService()
        self.alice = make_user("alice")
        self.bob = make_user("bob")
        self.cara = make_user("cara")

    def _counts(self, user):
        user.refresh_from_db()
        return user.followers_count, user.following_count

    def test_follow_creates_edge_and_moves_counters(self):
        self.assertTrue(self.service.follow(self.alice.id, self.bob.id))
        self.assertTrue(Follower.objects.filter(follower=self.alice, followed=self.bob).exists())
        self.assertEqual(self._counts(self.bob), (1, 0))
        self.assertEqual(self._counts(self.alice), (0, 1))

    def test_follow_twice_is_noop(self):
        self.service.follow(self.alice.id, self.bob.id)
        self.assertFalse(self.service.follow(self.alice.id, self.bob.id))
        self.assertEqual(Follower.objects.count(), 1)
        self.assertEqual(self._counts(self.bob), (1, 0))

    def test_self_follow_rejected(self):
        with self.assertRaises(ValidationError):
            self.service.follow(self.alice.id, self.alice.id)
        self.assertEqual(self._counts(self.alice), (0, 0))

    def test_follow_unknown_user_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.follow(self.alice.id, "00000000-0000-0000-0000-000000000000")

    def test_unfollow_reverses_counters(self):
        self.service.follow(self.alice.id, self.bob.id)
        self.assertTrue(self.service.unfollow(self.alice.id, self.bob.id))
        self.assertEqual(self._counts(self.bob), (0, 0))
        self.assertEqual(self._counts(self.alice), (0, 0))

    def test_unfollow_without_edge_is_noop(self):
        self.assertFalse(self.service.unfollow(self.alice.id, self.bob.id))
        self.assertEqual(self._counts(self.bob), (0, 0))

    def test_unfollow_self_is_noop(self):
        self.assertFalse(self.service.unfollow(self.alice.id, self.alice.id))

    def test_list_followers_and_following(self):
        self.service.follow(self.alice.id, self.bob.id)
        self.service.follow(self.cara.id, self.bob.id)
        self.service.follow(self.bob.id, self.cara.id)
        self.assertCountEqual(self.service.list_followers(self.bob.id), [self.alice, self.cara])
        self.assertEqual(self.service.list_following(self.bob.id), [self.cara])
        self.assertEqual(self.service.follow_counts(self.bob.id), (2, 1))

    def test_is_following(self):
        self.service.follow(self.alice.id, self.bob.id)
        self.assertTrue(self.service.is_following(self.alice.id, self.bob.id))
        self.assertFalse(self.service.is_following(self.bob.id, self.alice.id))
