"""Model for user comments on photos."""

from django.db import models

from photos.utils.ids import new_id
from .user import User
from .photo import Photo

class Comment(models.Model):
    """User-authored comment on a photo."""
    id = models.UUIDField(primary_key=True, default=new_id, editable=False)

    photo = models.ForeignKey(
        Photo,
        on_delete=models.CASCADE,
        db_column='photo_id',
        related_name='comments'
    )

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comments'
    )

    # text (1–2000)
    text = models.TextField(max_length=2000)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB table name for comments."""
        db_table = "comments"

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.user_id} on {self.photo_id}"
