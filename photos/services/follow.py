"""Follow graph store: directed edges plus the cached counters on both profiles."""

import logging

from django.db import transaction

from photos.exceptions import ValidationError
from photos.models import User
from photos.repos.followers_repo import FollowersRepo
from photos.repos.user_repo import UserRepo
from photos.utils.ids import same_id
from photos.services import counters

logger = logging.getLogger(__name__)


class FollowService:
    """Create and remove follow edges; counters move in the same transaction."""

    def __init__(self, followers_repo=None, user_repo=None):
        self.followers_repo = followers_repo or FollowersRepo()
        self.user_repo = user_repo or UserRepo()

    def _check_pair(self, follower_id, followed_id):
        if same_id(follower_id, followed_id):
            raise ValidationError("You cannot follow yourself", context={"user_id": str(follower_id)})
        self.user_repo.get_by_id(follower_id)
        self.user_repo.get_by_id(followed_id)

    @transaction.atomic
    def follow(self, follower_id, followed_id):
        """Create the edge; return True if created, False if it already existed."""
        self._check_pair(follower_id, followed_id)
        _, created = self.followers_repo.follow(follower_id=follower_id, followed_id=followed_id)
        if not created:
            return False
        counters.increment(User, followed_id, "followers_count")
        counters.increment(User, follower_id, "following_count")
        logger.info("%s followed %s", follower_id, followed_id)
        return True

    @transaction.atomic
    def unfollow(self, follower_id, followed_id):
        """Remove the edge; return True if removed, False if there was none."""
        if same_id(follower_id, followed_id):
            return False
        removed = self.followers_repo.unfollow(follower_id=follower_id, followed_id=followed_id)
        if not removed:
            return False
        counters.decrement(User, followed_id, "followers_count")
        counters.decrement(User, follower_id, "following_count")
        logger.info("%s unfollowed %s", follower_id, followed_id)
        return True

    def is_following(self, follower_id, followed_id):
        """Return True if the edge follower → followed exists."""
        return self.followers_repo.is_following(follower_id=follower_id, followed_id=followed_id)

    def list_followers(self, user_id):
        """Return the profiles following the user, in a stable order."""
        self.user_repo.get_by_id(user_id)
        return [edge.follower for edge in self.followers_repo.followers_of(user_id)]

    def list_following(self, user_id):
        """Return the profiles the user follows, in a stable order."""
        self.user_repo.get_by_id(user_id)
        return [edge.followed for edge in self.followers_repo.following_of(user_id)]

    def follow_counts(self, user_id):
        """Return (followers_count, following_count) as stored on the profile."""
        return counters.current(User, user_id, "followers_count", "following_count")
