from django.urls import reverse

from photos.models import Notification
from photos.services import NotificationService
from photos.tests.views.base import ApiTestCase


class NotificationApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        service = NotificationService()
        self.first = service.notify(self.alice.id, self.bob.id, Notification.FOLLOW, "bob started following you")
        self.second = service.notify(self.alice.id, self.bob.id, Notification.LIKE, "bob liked your photo")

    def test_list_with_unread_count(self):
        response = self.client.get(reverse("notification_list"))
        self.assertEqual(response.data["unread_count"], 2)
        self.assertEqual(response.data["results"][0]["content"], "bob liked your photo")

    def test_mark_one_read(self):
        url = reverse("notification_read", args=[self.first.id])
        self.assertEqual(self.client.post(url).status_code, 204)
        self.assertEqual(self.client.post(url).status_code, 204)
        self.assertEqual(self.client.get(reverse("notification_list")).data["unread_count"], 1)

    def test_cannot_mark_someone_elses(self):
        self.client.force_authenticate(user=self.bob)
        response = self.client.post(reverse("notification_read", args=[self.first.id]))
        self.assertEqual(response.status_code, 404)

    def test_mark_all_read(self):
        response = self.client.post(reverse("notifications_read_all"))
        self.assertEqual(response.data, {"updated": 2})
