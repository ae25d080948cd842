"""Repository helpers for profile lookups."""

from typing import List

from django.db.models import Q, QuerySet

from photos.db_accessor import DB_Accessor
from photos.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic profile queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def list_ids(self) -> List[str]:
        """Return all user IDs."""
        return list(self.model.objects.values_list("id", flat=True))

    def get_by_id(self, user_id) -> User:
        """Return a user by id."""
        return self.get(id=user_id)

    def get_by_username(self, username: str) -> User:
        """Return a user by username."""
        return self.get(username=username)

    def get_by_auth_uid(self, auth_uid: str) -> User:
        """Return the user linked to an identity-provider subject id."""
        return self.get(auth_uid=auth_uid)

    def username_taken(self, username: str, *, exclude_id=None) -> bool:
        """Return True if another user already holds the username (case-insensitive)."""
        qs = self.model.objects.filter(username__iexact=username)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()

    def search(self, query: str, *, limit: int = 20) -> QuerySet:
        """Case-insensitive containment match on username or display name, most followed first."""
        return (
            self.model.objects.filter(Q(username__icontains=query) | Q(display_name__icontains=query))
            .order_by("-followers_count", "username")[:limit]
        )

    def most_followed(self, *, limit: int = 10) -> QuerySet:
        """Return profiles ordered by follower count."""
        return self.list(order_by=("-followers_count", "username"), limit=limit)
