from django.urls import reverse

from photos.tests.views.base import ApiTestCase


class ProfileApiTests(ApiTestCase):
    def test_my_profile(self):
        response = self.client.get(reverse("my_profile"))
        self.assertEqual(response.data["username"], "alice")

    def test_update_my_profile(self):
        response = self.client.patch(reverse("my_profile"), {"bio": "Hello"}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["bio"], "Hello")

    def test_update_to_taken_username(self):
        response = self.client.patch(reverse("my_profile"), {"username": "bob"}, format="json")
        self.assertEqual(response.status_code, 400)

    def test_profile_detail_and_follow(self):
        url = reverse("profile_detail", args=["bob"])
        self.assertFalse(self.client.get(url).data["is_following"])

        response = self.client.post(reverse("profile_follow", args=["bob"]))
        self.assertEqual(response.data, {"following": True, "followers_count": 1, "following_count": 1})
        self.assertTrue(self.client.get(url).data["is_following"])

        followers = self.client.get(reverse("profile_followers", args=["bob"])).data
        self.assertEqual([p["username"] for p in followers], ["alice"])
        following = self.client.get(reverse("profile_following", args=["alice"])).data
        self.assertEqual([p["username"] for p in following], ["bob"])

        response = self.client.delete(reverse("profile_follow", args=["bob"]))
        self.assertFalse(response.data["following"])

    def test_self_follow_is_400(self):
        response = self.client.post(reverse("profile_follow", args=["alice"]))
        self.assertEqual(response.status_code, 400)

    def test_unknown_profile_is_404(self):
        self.assertEqual(self.client.get(reverse("profile_detail", args=["nobody"])).status_code, 404)

    def test_profile_photos_and_stats(self):
        photos = self.client.get(reverse("profile_photos", args=["bob"])).data
        self.assertEqual([p["id"] for p in photos], [str(self.photo.id)])
        self.assertIsNone(photos[0]["my_rating"])
        stats = self.client.get(reverse("profile_stats", args=["bob"])).data
        self.assertEqual(stats["total_uploads"], 1)

    def test_search_and_popular(self):
        results = self.client.get(reverse("profile_search"), {"q": "bo"}).data
        self.assertEqual([p["username"] for p in results], ["bob"])
        self.assertEqual(self.client.get(reverse("profile_search")).data, [])
        self.assertEqual(len(self.client.get(reverse("popular_profiles")).data), 2)
