"""Service helpers for profiles: lookup, first-login creation, edits and search."""

import logging
import re

from django.db import IntegrityError, transaction

from photos.exceptions import NotFoundError, ValidationError
from photos.models.user import USERNAME_PATTERN
from photos.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("username", "display_name", "bio", "avatar_url")
FIELD_LIMITS = {"display_name": 100, "bio": 500, "avatar_url": 500}


class ProfileService:
    """Read and update the public profile attached to each user."""

    def __init__(self, user_repo=None):
        self.user_repo = user_repo or UserRepo()

    @staticmethod
    def snapshot(user, size=120):
        """Return the display fields other records embed for a user."""
        return {
            "id": str(user.id),
            "username": user.username,
            "display_name": user.name,
            "avatar_url": user.avatar_or_gravatar(size=size),
        }

    def get_profile(self, user_id):
        """Return the profile for `user_id` or raise NotFoundError."""
        return self.user_repo.get_by_id(user_id)

    def get_by_username(self, username):
        """Return the profile with `username` or raise NotFoundError."""
        return self.user_repo.get_by_username(username)

    def _username_from_email(self, email, auth_uid):
        base = re.sub(r"\W", "", (email or "").split("@")[0])[:24]
        if len(base) < 3:
            base = "user" + re.sub(r"\W", "", auth_uid)[:8]
        candidate = base
        suffix = 1
        while self.user_repo.username_taken(candidate):
            suffix += 1
            candidate = f"{base}{suffix}"
        return candidate

    def ensure_profile(self, auth_uid, email="", display_name=""):
        """Return the profile for an identity-provider subject, creating it on first login."""
        try:
            return self.user_repo.get_by_auth_uid(auth_uid)
        except NotFoundError:
            pass
        username = self._username_from_email(email, auth_uid)
        try:
            with transaction.atomic():
                user = self.user_repo.model.objects.create_user(
                    username=username,
                    email=email or "",
                    auth_uid=auth_uid,
                    display_name=(display_name or "")[:100],
                )
        except IntegrityError:
            # Concurrent first logins for the same subject: the other request won.
            return self.user_repo.get_by_auth_uid(auth_uid)
        logger.info("Created profile %s for new identity", user.username)
        return user

    def _validate_updates(self, user_id, updates):
        unknown = set(updates) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(
                "These fields cannot be edited: " + ", ".join(sorted(unknown)),
                context={"fields": sorted(unknown)},
            )
        username = updates.get("username")
        if username is not None:
            if not re.match(USERNAME_PATTERN, username):
                raise ValidationError("Username must consist of 3 to 30 letters, digits or underscores")
            if self.user_repo.username_taken(username, exclude_id=user_id):
                raise ValidationError("That username is already taken")
        for field, limit in FIELD_LIMITS.items():
            value = updates.get(field)
            if value is not None and len(value) > limit:
                raise ValidationError(f"{field} cannot be longer than {limit} characters")

    @transaction.atomic
    def update_profile(self, user_id, **updates):
        """Apply edits to the editable profile fields and return the profile."""
        self._validate_updates(user_id, updates)
        user = self.user_repo.get_by_id(user_id)
        changed = [field for field, value in updates.items() if value is not None]
        for field in changed:
            setattr(user, field, updates[field])
        if changed:
            user.save(update_fields=changed + ["updated_at"])
        return user

    def search_profiles(self, query, limit=20):
        """Return profiles whose username or display name contains `query`."""
        query = (query or "").strip()
        if not query:
            return []
        return list(self.user_repo.search(query, limit=limit))

    def popular_profiles(self, limit=10):
        """Return the most followed profiles."""
        return list(self.user_repo.most_followed(limit=limit))
