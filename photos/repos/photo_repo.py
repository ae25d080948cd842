"""Repository helpers for fetching photos."""

from typing import Any, Dict, Optional, Sequence
from django.db.models import QuerySet
from photos.db_accessor import DB_Accessor
from photos.models.photo import Photo


class PhotoRepo(DB_Accessor):
    """Repository for Photo queries (gallery, per-owner, by id)."""
    def __init__(self) -> None:
        """Initialise with the Photo model."""
        super().__init__(Photo)

    def get_by_id(self, photo_id) -> Photo:
        """Return a photo with its owner joined."""
        return self._fetch(self.model.objects.select_related("owner"), id=photo_id)

    def lock(self, photo_id) -> Photo:
        """Return the photo row locked for update; call inside a transaction."""
        return self._fetch(self.model.objects.select_for_update(), id=photo_id)

    def list_for_gallery(
        self,
        *,
        owner_id=None,
        order_by: Sequence[str] = Photo.ORDERINGS[Photo.ORDER_LATEST],
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> QuerySet:
        """Return photos with optional owner filter and paging."""
        filters: Dict[str, Any] = {}
        if owner_id is not None:
            filters["owner_id"] = owner_id
        qs = self.model.objects.select_related("owner").filter(**filters)
        qs = self._apply_ordering(qs, order_by)
        return self._apply_slice(qs, offset=offset, limit=limit)
