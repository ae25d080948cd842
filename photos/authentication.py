import logging

from firebase_admin import auth
from rest_framework import authentication
from rest_framework import exceptions

from .firebase_admin_client import get_app
from .services.profile import ProfileService

logger = logging.getLogger(__name__)


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens.

    The first valid token for a subject creates that person's profile.
    """

    keyword = "Bearer"

    def authenticate(self, request):
        """Validate Authorization header token and return (user, auth)."""
        auth_header = request.META.get('HTTP_AUTHORIZATION')
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0] != self.keyword:
            raise exceptions.AuthenticationFailed('Invalid Authorization header')
        id_token = parts[1]

        try:
            get_app()
            decoded_token = auth.verify_id_token(id_token)
        except Exception as exc:
            logger.info("Rejected Firebase token: %s", exc)
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        uid = decoded_token.get("uid")
        if not uid:
            raise exceptions.AuthenticationFailed('Token has no subject')
        user = ProfileService().ensure_profile(
            uid,
            email=decoded_token.get("email", ""),
            display_name=decoded_token.get("name", ""),
        )
        if not user.is_active:
            raise exceptions.AuthenticationFailed('User inactive')
        return (user, decoded_token)

    def authenticate_header(self, request):
        return self.keyword
