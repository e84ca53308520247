"""Domain services."""

from .base import Service
from .category_service import CategoryService
from .path_service import CategoryPathService
from .post_service import PostService
from .subscription_service import SubscriptionService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "CategoryPathService",
    "CategoryService",
    "PostService",
    "Service",
    "SubscriptionService",
    "TagService",
    "UserService",
]
