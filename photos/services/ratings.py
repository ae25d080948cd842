"""Rating store: one rating per user and photo, with the photo's mean kept current."""

import logging

from django.db import transaction
from django.db.models import Avg, Count
from django.utils import timezone

from photos.exceptions import ValidationError
from photos.models import Photo, Rating
from photos.models.rating import RATING_MIN, RATING_MAX
from photos.repos.photo_repo import PhotoRepo
from photos.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)

# Received-rating buckets reported by user_stats, highest first.
DISTRIBUTION_BUCKETS = (
    ("9-10", 9),
    ("7-8", 7),
    ("5-6", 5),
    ("1-4", RATING_MIN),
)


class RatingService:
    """Upsert ratings and recompute the photo aggregate from source rows."""

    def __init__(self, rating_model=Rating, photo_repo=None, user_repo=None):
        self.rating_model = rating_model
        self.photo_repo = photo_repo or PhotoRepo()
        self.user_repo = user_repo or UserRepo()

    def validate_value(self, value):
        """Return `value` if it is an integer in [1, 10], else raise ValidationError."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError("Rating must be a whole number", context={"value": repr(value)})
        if not RATING_MIN <= value <= RATING_MAX:
            raise ValidationError(
                f"Rating must be between {RATING_MIN} and {RATING_MAX}",
                context={"value": value},
            )
        return value

    @transaction.atomic
    def rate(self, rater_id, photo_id, value):
        """Record `value` for (rater, photo) and return the new (rating, votes_count).

        A repeat rating overwrites the earlier one; only a first rating adds a vote.
        The mean is recomputed from every rating row while the photo row is locked,
        so concurrent raters are all reflected regardless of interleaving.
        """
        result, _ = self.rate_with_status(rater_id, photo_id, value)
        return result

    @transaction.atomic
    def rate_with_status(self, rater_id, photo_id, value):
        """Like rate(), but also report whether the rating row was newly created."""
        self.validate_value(value)
        self.user_repo.get_by_id(rater_id)
        photo = self.photo_repo.lock(photo_id)

        _, created = self.rating_model.objects.update_or_create(
            user_id=rater_id,
            photo_id=photo.id,
            defaults={"value": value, "rated_at": timezone.now()},
        )

        aggregate = self.rating_model.objects.filter(photo_id=photo.id).aggregate(
            mean=Avg("value"), votes=Count("id")
        )
        photo.rating = float(aggregate["mean"] or 0.0)
        photo.votes_count = aggregate["votes"]
        photo.save(update_fields=["rating", "votes_count", "updated_at"])

        logger.debug(
            "Rating %s by %s on %s (%s); aggregate now %.3f over %d votes",
            value, rater_id, photo.id, "new" if created else "updated",
            photo.rating, photo.votes_count,
        )
        return (photo.rating, photo.votes_count), created

    def get_user_rating(self, rater_id, photo_id):
        """Return the rater's value for the photo, or None when not rated."""
        return (
            self.rating_model.objects.filter(user_id=rater_id, photo_id=photo_id)
            .values_list("value", flat=True)
            .first()
        )

    def user_ratings(self, rater_id):
        """Return {photo_id: value} for every photo the user has rated."""
        return dict(
            self.rating_model.objects.filter(user_id=rater_id).values_list("photo_id", "value")
        )

    def user_stats(self, user_id):
        """Summarise uploads and ratings given/received for a profile page."""
        self.user_repo.get_by_id(user_id)
        given = self.rating_model.objects.filter(user_id=user_id)
        received = list(
            self.rating_model.objects.filter(photo__owner_id=user_id).values_list("value", flat=True)
        )
        average_given = given.aggregate(mean=Avg("value"))["mean"] or 0.0
        average_received = sum(received) / len(received) if received else 0.0

        return {
            "total_uploads": Photo.objects.filter(owner_id=user_id).count(),
            "total_ratings": given.count(),
            "average_rating_given": round(average_given, 1),
            "average_rating_received": round(average_received, 1),
            "rating_distribution": self._distribution(received),
        }

    def _distribution(self, values):
        counts = {label: 0 for label, _ in DISTRIBUTION_BUCKETS}
        for value in values:
            for label, floor in DISTRIBUTION_BUCKETS:
                if value >= floor:
                    counts[label] += 1
                    break
        total = len(values)
        if not total:
            return counts
        return {label: round(count * 100 / total) for label, count in counts.items()}
