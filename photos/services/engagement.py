"""Likes and comments on photos, each keeping its counter on the photo in step."""

import logging

from django.db import transaction

from photos.exceptions import AuthorizationError, NotFoundError, ValidationError
from photos.models import Comment, Like, Photo
from photos.repos.photo_repo import PhotoRepo
from photos.repos.user_repo import UserRepo
from photos.services import counters
from photos.services.profile import ProfileService
from photos.utils.ids import same_id

logger = logging.getLogger(__name__)

COMMENT_MAX_LENGTH = 2000


class EngagementService:
    """Encapsulate like toggling and comment CRUD for photos."""

    def __init__(self, like_model=Like, comment_model=Comment, photo_repo=None, user_repo=None):
        self.like_model = like_model
        self.comment_model = comment_model
        self.photo_repo = photo_repo or PhotoRepo()
        self.user_repo = user_repo or UserRepo()

    # Likes

    @transaction.atomic
    def like(self, user_id, photo_id):
        """Like the photo; return (created, likes_count). Liking twice is a no-op."""
        self.user_repo.get_by_id(user_id)
        photo = self.photo_repo.get_by_id(photo_id)
        _, created = self.like_model.objects.get_or_create(user_id=user_id, photo_id=photo.id)
        if created:
            counters.increment(Photo, photo.id, "likes_count")
        return created, counters.current(Photo, photo.id, "likes_count")

    @transaction.atomic
    def unlike(self, user_id, photo_id):
        """Remove the like; return (removed, likes_count). Unliking twice is a no-op."""
        photo = self.photo_repo.get_by_id(photo_id)
        removed, _ = self.like_model.objects.filter(user_id=user_id, photo_id=photo.id).delete()
        if removed:
            counters.decrement(Photo, photo.id, "likes_count")
        return bool(removed), counters.current(Photo, photo.id, "likes_count")

    def has_liked(self, user_id, photo_id):
        """Return True if the user currently likes the photo."""
        return self.like_model.objects.filter(user_id=user_id, photo_id=photo_id).exists()

    # Comments

    def _clean_text(self, text):
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValidationError("Comment cannot be empty")
        if len(cleaned) > COMMENT_MAX_LENGTH:
            raise ValidationError(
                f"Comment cannot be longer than {COMMENT_MAX_LENGTH} characters",
                context={"length": len(cleaned)},
            )
        return cleaned

    @transaction.atomic
    def add_comment(self, author_id, photo_id, text):
        """Append a comment and return it with a snapshot of its author."""
        cleaned = self._clean_text(text)
        author = self.user_repo.get_by_id(author_id)
        photo = self.photo_repo.get_by_id(photo_id)
        comment = self.comment_model.objects.create(photo=photo, user=author, text=cleaned)
        counters.increment(Photo, photo.id, "comments_count")
        return self.serialize_comment(comment)

    def fetch(self, comment_id):
        """Fetch a comment by id or raise NotFoundError."""
        try:
            return self.comment_model.objects.select_related("user", "photo").get(id=comment_id)
        except (self.comment_model.DoesNotExist, ValueError) as exc:
            raise NotFoundError("Comment not found", context={"comment_id": str(comment_id)}) from exc

    def can_delete(self, comment, user_id):
        """Return True when the user authored the comment."""
        return same_id(comment.user_id, user_id)

    @transaction.atomic
    def delete_comment(self, comment_id, requester_id):
        """Delete the requester's own comment; return the photo's new comments_count."""
        comment = self.fetch(comment_id)
        if not self.can_delete(comment, requester_id):
            raise AuthorizationError(
                "You do not have permission to delete this comment",
                context={"comment_id": str(comment_id), "requester_id": str(requester_id)},
            )
        photo_id = comment.photo_id
        comment.delete()
        counters.decrement(Photo, photo_id, "comments_count")
        return counters.current(Photo, photo_id, "comments_count")

    def list_comments(self, photo_id):
        """Return the photo's comments newest first, each with its author snapshot."""
        photo = self.photo_repo.get_by_id(photo_id)
        comments = (
            self.comment_model.objects.filter(photo=photo)
            .select_related("user")
            .order_by("-created_at", "-id")
        )
        return [self.serialize_comment(comment) for comment in comments]

    def serialize_comment(self, comment):
        return {
            "id": str(comment.id),
            "photo_id": str(comment.photo_id),
            "text": comment.text,
            "created_at": comment.created_at,
            "author": ProfileService.snapshot(comment.user),
        }
