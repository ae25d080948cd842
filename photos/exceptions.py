"""
Domain errors raised by the photos services.

Hierarchy:
    PhotosError (base)
    ├── ValidationError       malformed input: out-of-range rating, empty comment, self-follow
    ├── AuthorizationError    actor lacks rights over the target (comment, photo)
    ├── NotFoundError         referenced photo/profile/comment/notification absent
    ├── ConflictError         reserved; conflicts currently resolve as idempotent no-ops
    └── TransientStoreError   backing store unreachable or timed out, safe to retry

Validation and authorization errors are final. A TransientStoreError may be
retried with identical inputs because every mutating operation is idempotent
or an upsert. The API layer maps each kind to an HTTP status in
photos.views.errors.
"""

import functools
import logging

from django.db import InterfaceError, OperationalError

logger = logging.getLogger(__name__)


class PhotosError(Exception):
    """Base class for errors surfaced by the photos services."""

    code = "error"

    def __init__(self, message="An unexpected error occurred", context=None):
        self.message = message
        # Logged, never returned to API clients.
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PhotosError):
    code = "validation_error"


class AuthorizationError(PhotosError):
    code = "authorization_error"


class NotFoundError(PhotosError):
    code = "not_found"


class ConflictError(PhotosError):
    code = "conflict"


class TransientStoreError(PhotosError):
    code = "store_unavailable"


def translate_store_errors(func):
    """Re-raise connectivity failures from the database as TransientStoreError."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            logger.warning("Store call %s failed: %s", func.__qualname__, exc)
            raise TransientStoreError(
                "The data store is temporarily unavailable",
                context={"operation": func.__qualname__},
            ) from exc

    return wrapper
