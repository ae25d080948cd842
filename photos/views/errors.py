"""Map domain errors raised by the services onto HTTP responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from photos.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    PhotosError,
    TransientStoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    TransientStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc):
    """Return the HTTP status for a PhotosError subclass (500 for the bare base)."""
    for error_cls, code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_cls):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def api_exception_handler(exc, context):
    """DRF exception handler: domain errors become {"error", "detail"} bodies."""
    if not isinstance(exc, PhotosError):
        return exception_handler(exc, context)

    code = status_for(exc)
    view = context.get("view")
    logger.info(
        "%s in %s: %s %s",
        type(exc).__name__,
        type(view).__name__ if view else "view",
        exc.message,
        exc.context,
    )
    headers = {"Retry-After": "1"} if isinstance(exc, TransientStoreError) else None
    return Response({"error": exc.code, "detail": exc.message}, status=code, headers=headers)
