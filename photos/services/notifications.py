"""Notification dispatcher: append, list and mark notifications for a recipient."""

from django.db import transaction

from photos.exceptions import NotFoundError, ValidationError
from photos.models import Notification
from photos.services.profile import ProfileService
from photos.utils.ids import same_id

KINDS = {kind for kind, _ in Notification.TYPES}


class NotificationService:
    """Encapsulate notification creation, querying and read state."""

    def __init__(self, notification_model=Notification):
        self.notification_model = notification_model

    def notify(self, recipient_id, sender_id, kind, content, photo_id=None):
        """Append an unread notification; self-actions are silently skipped.

        Each insert runs in its own savepoint, so a failure here never leaves an
        enclosing transaction unusable.
        """
        if kind not in KINDS:
            raise ValidationError(f"Unknown notification type: {kind}", context={"kind": kind})
        if same_id(recipient_id, sender_id):
            return None
        with transaction.atomic():
            return self.notification_model.objects.create(
                recipient_id=recipient_id,
                sender_id=sender_id,
                notification_type=kind,
                content=content[:255],
                photo_id=photo_id,
            )

    def fetch(self, recipient_id):
        """Return the recipient's notifications newest first, senders joined."""
        return (
            self.notification_model.objects.filter(recipient_id=recipient_id)
            .select_related("sender", "photo")
            .order_by("-created_at", "-id")
        )

    def list_recent(self, recipient_id, limit=50):
        """Return up to `limit` notifications newest first with sender snapshots."""
        return [self.serialize(notif) for notif in self.fetch(recipient_id)[:limit]]

    def unread_count(self, recipient_id):
        """Return how many notifications the recipient has not read."""
        return self.notification_model.objects.filter(recipient_id=recipient_id, is_read=False).count()

    def mark_read(self, notification_id, recipient_id=None):
        """Mark one notification as read; repeating the call changes nothing."""
        lookup = {"id": notification_id}
        if recipient_id is not None:
            lookup["recipient_id"] = recipient_id
        if not self.notification_model.objects.filter(**lookup).exists():
            raise NotFoundError("Notification not found", context={"notification_id": str(notification_id)})
        self.notification_model.objects.filter(is_read=False, **lookup).update(is_read=True)

    def mark_all_read(self, recipient_id):
        """Mark all unread notifications for the recipient as read; return how many changed."""
        return self.notification_model.objects.filter(recipient_id=recipient_id, is_read=False).update(is_read=True)

    def serialize(self, notif):
        return {
            "id": notif.id,
            "type": notif.notification_type,
            "content": notif.content,
            "is_read": notif.is_read,
            "created_at": notif.created_at,
            "photo_id": str(notif.photo_id) if notif.photo_id else None,
            "sender": ProfileService.snapshot(notif.sender, size=60),
        }
