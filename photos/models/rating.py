"""Model representing one user's numeric rating of a photo."""

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

from .user import User
from .photo import Photo

RATING_MIN = 1
RATING_MAX = 10


class Rating(models.Model):
    """A 1-10 score; at most one per user/photo pair (re-rating overwrites)."""
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='ratings'
    )

    photo = models.ForeignKey(
        Photo,
        on_delete=models.CASCADE,
        db_column='photo_id',
        related_name='ratings'
    )

    value = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)]
    )

    # Refreshed on every upsert.
    rated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """One rating per user/photo, value kept in range by the database too."""
        db_table = "ratings"
        constraints = [
            models.UniqueConstraint(fields=["user", "photo"], name="uniq_ratings_user_photo"),
            models.CheckConstraint(
                condition=Q(value__gte=RATING_MIN) & Q(value__lte=RATING_MAX),
                name="chk_ratings_value_range",
            ),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} rated {self.photo_id}: {self.value}"
