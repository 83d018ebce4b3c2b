"""SQLAlchemy models."""

from social_backend.models.user import User
from social_backend.models.post import Post
from social_backend.models.like import Like
from social_backend.models.follow import Follow
from social_backend.models.hashtag import Hashtag, post_hashtags
from social_backend.models.activity import Activity, ActivityType

__all__ = [
    "User",
    "Post",
    "Like",
    "Follow",
    "Hashtag",
    "Activity",
    "ActivityType",
    "post_hashtags",
]
