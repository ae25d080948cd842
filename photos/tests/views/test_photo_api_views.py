from django.urls import reverse

from photos.models import Notification, Photo
from photos.tests.helpers import make_photo
from photos.tests.views.base import ApiTestCase


class PhotoApiTests(ApiTestCase):
    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        response = self.client.get(reverse("photo_list"))
        self.assertIn(response.status_code, (401, 403))

    def test_gallery_lists_photos(self):
        response = self.client.get(reverse("photo_list"), {"order": "top_rated"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data[0]["id"], str(self.photo.id))
        self.assertEqual(response.data[0]["owner"]["username"], "bob")

    def test_gallery_marks_callers_own_ratings(self):
        other = make_photo(owner=self.bob, title="other")
        self.client.put(reverse("photo_rating", args=[self.photo.id]), {"value": 8}, format="json")
        response = self.client.get(reverse("photo_list"))
        mine = {row["id"]: row["my_rating"] for row in response.data}
        self.assertEqual(mine, {str(self.photo.id): 8, str(other.id): None})

    def test_gallery_rejects_unknown_order(self):
        response = self.client.get(reverse("photo_list"), {"order": "random"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "validation_error")

    def test_create_photo(self):
        response = self.client.post(
            reverse("photo_list"),
            {"title": "New fit", "image_url": "https://img.example.org/n.jpg"},
            format="json",
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["owner"]["username"], "alice")
        self.assertEqual(response.data["votes_count"], 0)

    def test_create_photo_without_title(self):
        response = self.client.post(
            reverse("photo_list"), {"title": "", "image_url": "https://img.example.org/n.jpg"}, format="json"
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["detail"], "Title is required")

    def test_photo_detail_includes_caller_state(self):
        response = self.client.get(reverse("photo_detail", args=[self.photo.id]))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.data["liked"])
        self.assertEqual(response.data["my_rating"], {"has_rated": False, "value": None})

    def test_missing_photo_is_404(self):
        response = self.client.get(reverse("photo_detail", args=["00000000-0000-0000-0000-000000000000"]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"], "not_found")

    def test_non_owner_cannot_delete(self):
        response = self.client.delete(reverse("photo_detail", args=[self.photo.id]))
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Photo.objects.filter(id=self.photo.id).exists())

    def test_owner_can_edit_and_delete(self):
        mine = make_photo(owner=self.alice)
        response = self.client.patch(reverse("photo_detail", args=[mine.id]), {"title": "Renamed"}, format="json")
        self.assertEqual(response.data["title"], "Renamed")
        response = self.client.delete(reverse("photo_detail", args=[mine.id]))
        self.assertEqual(response.status_code, 204)

    def test_rate_photo(self):
        url = reverse("photo_rating", args=[self.photo.id])
        response = self.client.put(url, {"value": 9}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["rating"], 9.0)
        self.assertEqual(response.data["votes_count"], 1)
        self.assertEqual(self.client.get(url).data, {"has_rated": True, "value": 9})

    def test_rate_out_of_range(self):
        response = self.client.put(reverse("photo_rating", args=[self.photo.id]), {"value": 0}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "validation_error")

    def test_like_and_unlike(self):
        url = reverse("photo_like", args=[self.photo.id])
        self.assertEqual(self.client.post(url).data["likes_count"], 1)
        self.assertEqual(self.client.post(url).data["likes_count"], 1)
        self.assertEqual(self.client.delete(url).data["likes_count"], 0)
        self.assertEqual(Notification.objects.filter(recipient=self.bob).count(), 1)

    def test_comment_flow(self):
        url = reverse("photo_comments", args=[self.photo.id])
        response = self.client.post(url, {"text": "nice"}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["comments_count"], 1)
        comment_id = response.data["comment"]["id"]

        listing = self.client.get(url)
        self.assertEqual([c["text"] for c in listing.data], ["nice"])

        response = self.client.delete(reverse("comment_detail", args=[comment_id]))
        self.assertEqual(response.data["comments_count"], 0)

    def test_empty_comment_is_400(self):
        response = self.client.post(reverse("photo_comments", args=[self.photo.id]), {"text": " "}, format="json")
        self.assertEqual(response.status_code, 400)

    def test_deleting_someone_elses_comment_is_403(self):
        url = reverse("photo_comments", args=[self.photo.id])
        comment_id = self.client.post(url, {"text": "nice"}, format="json").data["comment"]["id"]
        self.client.force_authenticate(user=self.bob)
        response = self.client.delete(reverse("comment_detail", args=[comment_id]))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data["error"], "authorization_error")
