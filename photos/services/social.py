"""
Aggregation facade: the one entry point the API uses for user actions.

Every action follows the same steps:
1. validate input
2. apply the edge/row mutation together with its counters (one transaction)
3. best-effort notification to the affected user
4. return the public aggregate so the client can update optimistically

Notification failures are logged and swallowed; they never undo or fail the
action that triggered them. Validation and authorization errors always reach
the caller unchanged.
"""

import logging

from photos.exceptions import translate_store_errors
from photos.models import Notification, Photo
from photos.repos.photo_repo import PhotoRepo
from photos.repos.user_repo import UserRepo
from photos.services import counters
from photos.services.engagement import EngagementService
from photos.services.follow import FollowService
from photos.services.notifications import NotificationService
from photos.services.ratings import RatingService

logger = logging.getLogger(__name__)


class SocialFacade:
    """Compose the stores into one call per user action; the actor id is always explicit."""

    def __init__(
        self,
        rating_service=None,
        follow_service=None,
        engagement_service=None,
        notification_service=None,
        photo_repo=None,
        user_repo=None,
    ):
        self.ratings = rating_service or RatingService()
        self.follows = follow_service or FollowService()
        self.engagement = engagement_service or EngagementService()
        self.notifications = notification_service or NotificationService()
        self.photo_repo = photo_repo or PhotoRepo()
        self.user_repo = user_repo or UserRepo()

    def _notify(self, kind, sender_id, build):
        """Send one notification; `build()` returns (recipient_id, content, photo_id).

        Building the notification reads the store again, so it runs inside the
        suppressed block together with the insert.
        """
        try:
            recipient_id, content, photo_id = build()
            self.notifications.notify(recipient_id, sender_id, kind, content, photo_id=photo_id)
        except Exception:
            logger.warning("Dropped %s notification from %s", kind, sender_id, exc_info=True)

    def _username(self, user_id):
        return self.user_repo.get_by_id(user_id).username

    def _about_photo(self, actor_id, photo_id, text):
        def build():
            photo = self.photo_repo.get_by_id(photo_id)
            return photo.owner_id, text.format(username=self._username(actor_id)), photo.id
        return build

    # Ratings

    @translate_store_errors
    def rate(self, actor_id, photo_id, value):
        """Rate a photo 1-10. Only a first rating notifies the owner; re-rating does not."""
        (rating, votes_count), created = self.ratings.rate_with_status(actor_id, photo_id, value)
        if created:
            self._notify(
                Notification.RATING,
                actor_id,
                self._about_photo(actor_id, photo_id, "{username} rated your photo " + f"{value}/10"),
            )
        return {
            "photo_id": str(photo_id),
            "rating": rating,
            "votes_count": votes_count,
            "has_rated": True,
            "value": value,
        }

    @translate_store_errors
    def user_rating(self, actor_id, photo_id):
        """Return the actor's own rating as an explicit has_rated/value pair."""
        self.photo_repo.get_by_id(photo_id)
        value = self.ratings.get_user_rating(actor_id, photo_id)
        return {"has_rated": value is not None, "value": value}

    # Follow graph

    def _follow_state(self, actor_id, target_id, following):
        followers_count, _ = self.follows.follow_counts(target_id)
        _, following_count = self.follows.follow_counts(actor_id)
        return {
            "following": following,
            "followers_count": followers_count,
            "following_count": following_count,
        }

    @translate_store_errors
    def follow(self, actor_id, target_id):
        """Follow `target_id`; following twice is a no-op and notifies only once."""
        created = self.follows.follow(actor_id, target_id)
        if created:
            self._notify(
                Notification.FOLLOW,
                actor_id,
                lambda: (target_id, f"{self._username(actor_id)} started following you", None),
            )
        return self._follow_state(actor_id, target_id, True)

    @translate_store_errors
    def unfollow(self, actor_id, target_id):
        """Stop following `target_id`; a missing edge is a no-op."""
        self.follows.unfollow(actor_id, target_id)
        return self._follow_state(actor_id, target_id, False)

    # Likes

    @translate_store_errors
    def like(self, actor_id, photo_id):
        created, likes_count = self.engagement.like(actor_id, photo_id)
        if created:
            self._notify(
                Notification.LIKE,
                actor_id,
                self._about_photo(actor_id, photo_id, "{username} liked your photo"),
            )
        return {"photo_id": str(photo_id), "liked": True, "likes_count": likes_count}

    @translate_store_errors
    def unlike(self, actor_id, photo_id):
        _, likes_count = self.engagement.unlike(actor_id, photo_id)
        return {"photo_id": str(photo_id), "liked": False, "likes_count": likes_count}

    # Comments

    @translate_store_errors
    def comment(self, actor_id, photo_id, text):
        """Post a comment; returns it with the author snapshot and the new count."""
        comment = self.engagement.add_comment(actor_id, photo_id, text)
        comments_count = counters.current(Photo, comment["photo_id"], "comments_count")
        self._notify(
            Notification.COMMENT,
            actor_id,
            self._about_photo(actor_id, photo_id, "{username} commented on your photo"),
        )
        return {"comment": comment, "comments_count": comments_count}

    @translate_store_errors
    def delete_comment(self, actor_id, comment_id):
        comments_count = self.engagement.delete_comment(comment_id, actor_id)
        return {"comment_id": str(comment_id), "comments_count": comments_count}
