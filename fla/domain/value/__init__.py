"""Domain value objects."""

from fla.domain.value.identifiers import (
    CategoryId,
    EntityId,
    PostId,
    SubscriptionId,
    TagId,
    UserId,
)
from fla.domain.value.slug import generate_slug
from fla.domain.value.status import PostStatus
from fla.domain.value.types import (
    CategoryName,
    Description,
    Email,
    FirstName,
    LastName,
    PostContent,
    Role,
    SchemaType,
    Slug,
    SubscriptionStatus,
    TagName,
    Title,
    Username,
)

__all__ = [
    # Identifiers
    "EntityId",
    "UserId",
    "PostId",
    "CategoryId",
    "TagId",
    "SubscriptionId",
    # Types
    "Slug",
    "Title",
    "Description",
    "PostContent",
    "CategoryName",
    "TagName",
    "Email",
    "FirstName",
    "LastName",
    "Username",
    "Role",
    "PostStatus",
    "SchemaType",
    "SubscriptionStatus",
    # Slug generation
    "generate_slug",
]
