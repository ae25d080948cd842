from django.test import TestCase, override_settings

from photos.exceptions import AuthorizationError, NotFoundError, ValidationError
from photos.models import Photo
from photos.services import PhotoService
from photos.tests.helpers import make_photo, make_user


class PhotoServiceTestCase(TestCase):
    def setUp(self):
        self.service = PhotoService()
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_create_photo_starts_with_zero_aggregates(self):
        photo = self.service.create_photo(self.alice.id, " Outfit ", "https://img.example.org/1.jpg", "desc")
        self.assertEqual(photo.title, "Outfit")
        self.assertEqual(photo.owner, self.alice)
        self.assertEqual(
            (photo.rating, photo.votes_count, photo.likes_count, photo.comments_count),
            (0.0, 0, 0, 0),
        )

    def test_create_photo_requires_title_and_image(self):
        with self.assertRaises(ValidationError):
            self.service.create_photo(self.alice.id, "  ", "https://img.example.org/1.jpg")
        with self.assertRaises(ValidationError):
            self.service.create_photo(self.alice.id, "Outfit", "")
        self.assertFalse(Photo.objects.exists())

    def test_list_photos_rejects_unknown_order(self):
        with self.assertRaises(ValidationError):
            self.service.list_photos(order="random")

    def test_list_photos_rejects_bad_paging(self):
        with self.assertRaises(ValidationError):
            self.service.list_photos(page=0)

    @override_settings(PHOTOS_PAGE_SIZE=2)
    def test_list_photos_uses_default_page_size(self):
        for i in range(3):
            make_photo(owner=self.alice, title=f"p{i}")
        self.assertEqual(len(self.service.list_photos()), 2)
        self.assertEqual(len(self.service.list_photos(page=2)), 1)

    def test_list_photos_for_owner(self):
        mine = make_photo(owner=self.alice)
        make_photo(owner=self.bob)
        self.assertEqual(self.service.list_photos(owner_id=self.alice.id), [mine])

    def test_owner_can_update(self):
        photo = make_photo(owner=self.alice)
        updated = self.service.update_photo(photo.id, self.alice.id, title="New", description="Better")
        self.assertEqual((updated.title, updated.description), ("New", "Better"))

    def test_other_user_cannot_update_or_delete(self):
        photo = make_photo(owner=self.alice)
        with self.assertRaises(AuthorizationError):
            self.service.update_photo(photo.id, self.bob.id, title="Mine now")
        with self.assertRaises(AuthorizationError):
            self.service.delete_photo(photo.id, self.bob.id)
        self.assertTrue(Photo.objects.filter(id=photo.id).exists())

    def test_delete_returns_image_reference(self):
        photo = make_photo(owner=self.alice, image_url="https://img.example.org/x.jpg")
        self.assertEqual(self.service.delete_photo(photo.id, self.alice.id), "https://img.example.org/x.jpg")
        with self.assertRaises(NotFoundError):
            self.service.get_photo(photo.id)
