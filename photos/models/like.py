"""Model representing a user's like on a photo."""

from django.db import models
from .user import User
from .photo import Photo

class Like(models.Model):
    """User like on a photo."""
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='likes'
    )

    photo = models.ForeignKey(
        Photo,
        on_delete=models.CASCADE,
        db_column='photo_id',
        related_name='likes'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/photo pair."""
        db_table = "likes"
        constraints = [
            models.UniqueConstraint(fields=["user", "photo"], name="uniq_likes_user_photo"),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.photo_id}"
