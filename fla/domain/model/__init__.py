"""Domain model entities for the learning blog."""

from fla.domain.model.category import Category
from fla.domain.model.path import CategoryBreadcrumb, CategoryPath
from fla.domain.model.permissions import (
    OwnedContent,
    PermissionChecker,
    PostPermissionChecker,
)
from fla.domain.model.post import Post
from fla.domain.model.subscription import Subscription
from fla.domain.model.tag import Tag
from fla.domain.model.user import User

__all__ = [
    "Category",
    "CategoryPath",
    "CategoryBreadcrumb",
    "Post",
    "User",
    "Tag",
    "Subscription",
    "PermissionChecker",
    "PostPermissionChecker",
    "OwnedContent",
]
