from .profile import ProfileService
from .ratings import RatingService
from .follow import FollowService
from .engagement import EngagementService
from .notifications import NotificationService
from .photos import PhotoService
from .social import SocialFacade

__all__ = [
    "ProfileService",
    "RatingService",
    "FollowService",
    "EngagementService",
    "NotificationService",
    "PhotoService",
    "SocialFacade",
]
