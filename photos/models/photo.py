from django.db import models

from photos.utils.ids import new_id
from .user import User

"""
Photo model

A progress photo uploaded by a user. The image itself lives in external object
storage; `image_url` is the reference handed back by that storage.

Cached aggregates (all maintained by the stores in photos.services, never
recomputed on read):
- `rating`: mean of every Rating row for the photo, 0 when nobody rated it
- `votes_count`: number of Rating rows
- `likes_count`: number of Like rows
- `comments_count`: number of Comment rows

Deleting a photo cascades to its ratings, likes, comments and the
notifications that point at it.
"""


class Photo(models.Model):
    ORDER_LATEST = "latest"
    ORDER_POPULAR = "popular"
    ORDER_TOP_RATED = "top_rated"

    ORDERINGS = {
        ORDER_LATEST: ("-created_at", "-id"),
        ORDER_POPULAR: ("-votes_count", "-created_at", "-id"),
        ORDER_TOP_RATED: ("-rating", "-votes_count", "-created_at", "-id"),
    }

    id = models.UUIDField(primary_key=True, default=new_id, editable=False)

    owner = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='photos',
        db_column='owner_id'
    )

    title = models.CharField(max_length=255)
    description = models.TextField(max_length=4000, blank=True, null=True)
    image_url = models.CharField(max_length=500)

    rating = models.FloatField(default=0.0)
    votes_count = models.PositiveIntegerField(default=0)
    likes_count = models.PositiveIntegerField(default=0)
    comments_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'photos'
        indexes = [
            models.Index(fields=["owner", "created_at"], name="photos_owner_created_idx"),
        ]

    def __str__(self):
        return self.title
