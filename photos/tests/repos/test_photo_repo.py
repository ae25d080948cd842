from django.test import TestCase

from photos.exceptions import NotFoundError
from photos.models import Photo
from photos.repos.photo_repo import PhotoRepo
from photos.tests.helpers import make_photo, make_user


class PhotoRepoTests(TestCase):
    def setUp(self):
        self.repo = PhotoRepo()
        self.alice = make_user("alice")
        self.bob = make_user("bob")
        self.first = make_photo(owner=self.alice, title="first", votes_count=5, rating=6.0)
        self.second = make_photo(owner=self.alice, title="second", votes_count=1, rating=9.0)
        self.third = make_photo(owner=self.bob, title="third", votes_count=3, rating=7.5)

    def test_get_by_id_joins_owner(self):
        photo = self.repo.get_by_id(self.first.id)
        with self.assertNumQueries(0):
            self.assertEqual(photo.owner.username, "alice")

    def test_get_by_id_missing_raises(self):
        with self.assertRaises(NotFoundError):
            self.repo.get_by_id("00000000-0000-0000-0000-000000000000")

    def test_gallery_popular_order(self):
        photos = list(self.repo.list_for_gallery(order_by=Photo.ORDERINGS[Photo.ORDER_POPULAR]))
        self.assertEqual(photos, [self.first, self.third, self.second])

    def test_gallery_top_rated_order(self):
        photos = list(self.repo.list_for_gallery(order_by=Photo.ORDERINGS[Photo.ORDER_TOP_RATED]))
        self.assertEqual(photos, [self.second, self.third, self.first])

    def test_gallery_filters_by_owner_and_pages(self):
        photos = list(
            self.repo.list_for_gallery(
                owner_id=self.alice.id,
                order_by=Photo.ORDERINGS[Photo.ORDER_POPULAR],
                limit=1,
                offset=1,
            )
        )
        self.assertEqual(photos, [self.second])
