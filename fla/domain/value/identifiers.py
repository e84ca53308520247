"""Strongly typed identifiers for domain entities.

Each entity gets its own identifier class. Identifiers of different entities
never compare equal, even when they wrap the same string, which prevents
mixing up a post ID with a category ID.
"""

from typing import ClassVar
from uuid import uuid4

from pydantic import field_validator

from fla.domain.error import ValidationError
from fla.domain.value.common import RootValueObject
from fla.domain.value.validators import err_missing


class EntityId(RootValueObject[str]):
    """Base identifier: a trimmed, non-empty string."""

    entity_name: ClassVar[str] = "entity"

    @field_validator("root")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Validate the identifier is present."""
        v = v.strip()
        if not v:
            raise ValidationError(
                err_missing(f"{cls.entity_name} ID"),
                operation=f"{cls.__name__}.validate",
            )
        return v

    @classmethod
    def generate(cls):
        """Create a new random identifier."""
        return cls(uuid4().hex)


class UserId(EntityId):
    entity_name: ClassVar[str] = "user"


class PostId(EntityId):
    entity_name: ClassVar[str] = "post"


class CategoryId(EntityId):
    entity_name: ClassVar[str] = "category"


class TagId(EntityId):
    entity_name: ClassVar[str] = "tag"


class SubscriptionId(EntityId):
    entity_name: ClassVar[str] = "subscription"
