"""Photo catalogue: upload metadata, gallery listing, owner edits and deletion."""

import logging

from django.conf import settings
from django.db import transaction

from photos.exceptions import AuthorizationError, ValidationError
from photos.models import Photo
from photos.repos.photo_repo import PhotoRepo
from photos.repos.user_repo import UserRepo
from photos.utils.ids import same_id

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 4000


class PhotoService:
    """Create, list, edit and delete photos; counters are left to the stores."""

    def __init__(self, photo_repo=None, user_repo=None):
        self.photo_repo = photo_repo or PhotoRepo()
        self.user_repo = user_repo or UserRepo()

    def _clean_title(self, title):
        cleaned = (title or "").strip()
        if not cleaned:
            raise ValidationError("Title is required")
        if len(cleaned) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title cannot be longer than {TITLE_MAX_LENGTH} characters")
        return cleaned

    def _clean_description(self, description):
        if description is None:
            return None
        cleaned = description.strip()
        if len(cleaned) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(f"Description cannot be longer than {DESCRIPTION_MAX_LENGTH} characters")
        return cleaned or None

    def create_photo(self, owner_id, title, image_url, description=None):
        """Record an uploaded image for `owner_id` with all counters at zero."""
        owner = self.user_repo.get_by_id(owner_id)
        if not (image_url or "").strip():
            raise ValidationError("An image reference is required")
        photo = self.photo_repo.create(
            owner=owner,
            title=self._clean_title(title),
            description=self._clean_description(description),
            image_url=image_url.strip(),
        )
        logger.info("Photo %s uploaded by %s", photo.id, owner.username)
        return photo

    def get_photo(self, photo_id):
        """Return the photo or raise NotFoundError."""
        return self.photo_repo.get_by_id(photo_id)

    def list_photos(self, order=Photo.ORDER_LATEST, page=1, limit=None, owner_id=None):
        """Return one page of the gallery in the requested order."""
        if order not in Photo.ORDERINGS:
            raise ValidationError(
                f"Unknown order '{order}'; expected one of: " + ", ".join(Photo.ORDERINGS),
                context={"order": order},
            )
        limit = settings.PHOTOS_PAGE_SIZE if limit is None else limit
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive", context={"page": page, "limit": limit})
        return list(
            self.photo_repo.list_for_gallery(
                owner_id=owner_id,
                order_by=Photo.ORDERINGS[order],
                limit=limit,
                offset=(page - 1) * limit,
            )
        )

    def _owned(self, photo_id, requester_id, action):
        photo = self.photo_repo.get_by_id(photo_id)
        if not same_id(photo.owner_id, requester_id):
            raise AuthorizationError(
                f"You do not have permission to {action} this photo",
                context={"photo_id": str(photo_id), "requester_id": str(requester_id)},
            )
        return photo

    @transaction.atomic
    def update_photo(self, photo_id, requester_id, title=None, description=None):
        """Edit title/description of the requester's own photo."""
        photo = self._owned(photo_id, requester_id, "update")
        fields = []
        if title is not None:
            photo.title = self._clean_title(title)
            fields.append("title")
        if description is not None:
            photo.description = self._clean_description(description)
            fields.append("description")
        if fields:
            photo.save(update_fields=fields + ["updated_at"])
        return photo

    @transaction.atomic
    def delete_photo(self, photo_id, requester_id):
        """Delete the requester's own photo with its ratings, likes and comments."""
        photo = self._owned(photo_id, requester_id, "delete")
        image_url = photo.image_url
        photo.delete()
        logger.info("Photo %s deleted by owner; image %s is now unreferenced", photo_id, image_url)
        return image_url
