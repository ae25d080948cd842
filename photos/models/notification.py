from django.db import models
from django.conf import settings
from .photo import Photo

"""
Notification model

In-app notifications for users (the bell / activity feed).

Core fields:
- `recipient`: who receives the notification
- `sender`: who performed the action
- `notification_type`: like / comment / rating / follow
- `content`: human-readable line shown in the feed

Optional link:
- `photo`: the Photo involved (likes, comments, ratings)

Notifications are never created for self-actions; NotificationService enforces
that. Rows are ordered newest-first.
"""

class Notification(models.Model):
    LIKE = 'like'
    COMMENT = 'comment'
    RATING = 'rating'
    FOLLOW = 'follow'

    TYPES = [
        (LIKE, 'Like'),
        (COMMENT, 'Comment'),
        (RATING, 'Rating'),
        (FOLLOW, 'Follow'),
    ]

    recipient = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='notifications', on_delete=models.CASCADE)
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='sent_notifications', on_delete=models.CASCADE)
    notification_type = models.CharField(max_length=20, choices=TYPES)
    content = models.CharField(max_length=255)
    photo = models.ForeignKey(Photo, null=True, blank=True, on_delete=models.CASCADE)

    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=["recipient", "is_read"], name="notif_recipient_read_idx"),
        ]

    def __str__(self):
        return f"Notification for {self.recipient}: {self.notification_type}"
