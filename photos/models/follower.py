"""Model representing follower→followed relationships."""

from __future__ import annotations
from django.conf import settings
from django.db import models
from django.db.models import Q, F


class Follower(models.Model):
    """Directed follow edge: `follower` subscribes to `followed`."""

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following",      # user.following -> edges this user created (outbound)
        db_column="follower_id",
    )
    followed = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="followers",      # user.followers -> edges pointing to this user (inbound)
        db_column="followed_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB metadata and constraints for follower relationships."""
        db_table = "followers"
        constraints = [
            models.UniqueConstraint(fields=["follower", "followed"], name="uniq_followers_follower_followed"),
            models.CheckConstraint(condition=~Q(follower=F("followed")), name="chk_followers_not_self"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"Follower(follower={self.follower_id}, followed={self.followed_id})"
