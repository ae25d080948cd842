from typing import Any, Mapping, Optional, Sequence, Type
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Model, QuerySet

from photos.exceptions import NotFoundError


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations.

    Every read goes through here so callers always get one shape back: a
    queryset, a single instance, or NotFoundError.
    """

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> QuerySet:
        """Return a filtered/sliced queryset."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        qs = self._apply_ordering(qs, order_by)
        qs = self._apply_slice(qs, offset=offset, limit=limit)
        return qs

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[str]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def _apply_slice(
        self, qs: QuerySet, *, offset: int = 0, limit: Optional[int] = None
    ) -> QuerySet:
        if not (offset or limit is not None):
            return qs
        start = max(0, int(offset))
        end = None if limit is None else start + max(0, int(limit))
        return qs[start:end]

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup or raise NotFoundError."""
        return self._fetch(self.model.objects.all(), **lookup)

    def _fetch(self, qs: QuerySet, **lookup: Any) -> Model:
        try:
            return qs.get(**lookup)
        except (self.model.DoesNotExist, ValueError, DjangoValidationError) as exc:
            raise NotFoundError(
                f"{self.model._meta.verbose_name.capitalize()} not found",
                context={"lookup": {k: str(v) for k, v in lookup.items()}},
            ) from exc

    def exists(self, **lookup: Any) -> bool:
        """Return True when any object matches the lookup."""
        return self.model.objects.filter(**lookup).exists()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
