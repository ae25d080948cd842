"""Repository helpers for follower relationships."""

from django.db.models import QuerySet

from photos.db_accessor import DB_Accessor
from photos.models.follower import Follower


class FollowersRepo(DB_Accessor):
    """Repository wrapper for follower relationships."""
    def __init__(self) -> None:
        """Initialise with the Follower model."""
        super().__init__(Follower)

    def followers_of(self, followed_id) -> QuerySet:
        """Edges pointing at a profile, oldest first, with the follower joined."""
        edges = self.list(filters={"followed_id": followed_id}, order_by=("created_at", "id"))
        return edges.select_related("follower")

    def following_of(self, follower_id) -> QuerySet:
        """Edges leaving a profile, oldest first, with the followed profile joined."""
        edges = self.list(filters={"follower_id": follower_id}, order_by=("created_at", "id"))
        return edges.select_related("followed")

    def is_following(self, *, follower_id, followed_id) -> bool:
        """Return True if follower_id follows followed_id."""
        return self.exists(follower_id=follower_id, followed_id=followed_id)

    def follow(self, *, follower_id, followed_id):
        """Create the edge unless present; return (edge, created)."""
        return self.model.objects.get_or_create(follower_id=follower_id, followed_id=followed_id)

    def unfollow(self, *, follower_id, followed_id) -> int:
        """Remove a follower relation."""
        return self.delete(follower_id=follower_id, followed_id=followed_id)
