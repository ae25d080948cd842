from django.test import TestCase

from photos.exceptions import NotFoundError
from photos.repos.user_repo import UserRepo
from photos.tests.helpers import make_user


class UserRepoTests(TestCase):
    def setUp(self):
        self.repo = UserRepo()
        self.alice = make_user("alice", display_name="Alice Liddell")
        self.bob = make_user("bobby", display_name="Bob")

    def test_get_by_username(self):
        self.assertEqual(self.repo.get_by_username("alice"), self.alice)

    def test_get_by_id_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.repo.get_by_id("00000000-0000-0000-0000-000000000000")

    def test_get_by_id_malformed_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.repo.get_by_id("not-a-uuid")

    def test_username_taken_is_case_insensitive(self):
        self.assertTrue(self.repo.username_taken("ALICE"))
        self.assertFalse(self.repo.username_taken("alice", exclude_id=self.alice.id))

    def test_search_matches_display_name(self):
        results = list(self.repo.search("liddell"))
        self.assertEqual(results, [self.alice])

    def test_most_followed_orders_by_followers(self):
        self.bob.followers_count = 3
        self.bob.save()
        self.assertEqual(list(self.repo.most_followed(limit=1)), [self.bob])

    def test_list_ids(self):
        self.assertCountEqual(self.repo.list_ids(), [self.alice.id, self.bob.id])
