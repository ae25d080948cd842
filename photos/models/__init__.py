from .user import User
from .photo import Photo
from .rating import Rating
from .like import Like
from .comment import Comment
from .follower import Follower
from .notification import Notification

__all__ = [
    "User",
    "Photo",
    "Rating",
    "Like",
    "Comment",
    "Follower",
    "Notification",
]
