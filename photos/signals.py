from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from photos.models import Notification


@receiver(post_save, sender=Notification)
def trim_notification_history(sender, instance, created, **kwargs):
    """Keep a reasonable cap on notification history without nuking recent items."""
    if not created:
        return

    limit = getattr(settings, "PHOTOS_NOTIFICATION_HISTORY_LIMIT", 100)
    keep_ids = list(
        Notification.objects.filter(recipient_id=instance.recipient_id)
        .order_by("-created_at", "-id")
        .values_list("id", flat=True)[:limit]
    )
    if keep_ids:
        Notification.objects.filter(recipient_id=instance.recipient_id).exclude(id__in=keep_ids).delete()
