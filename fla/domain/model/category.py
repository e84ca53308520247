"""Category entity.

Categories organize learning material in a tree of at most three levels:
Level -> Skill -> Topic (e.g. A1 -> Compréhension écrite -> Sports).
"""

from datetime import datetime
from typing import Optional

from pydantic import model_validator

from fla.domain.clock import Clock
from fla.domain.error import DomainError, ValidationError
from fla.domain.model.common import DomainModel
from fla.domain.value import CategoryId, CategoryName, Description, Slug, UserId

MAX_CATEGORY_DEPTH = 3

CATEGORY_CIRCULAR_REFERENCE = "Category cannot be its own parent."
CATEGORY_MAX_DEPTH_EXCEEDED = "Category hierarchy cannot exceed 3 levels deep."
CATEGORY_SLUG_NOT_UNIQUE = "Category slug must be unique within parent."


class Category(DomainModel):
    """Hierarchical content organization unit.

    The slug is derived from the name at creation time and is what URL
    paths are built from. ``parent_id`` is None for root categories.
    """

    id: CategoryId
    name: CategoryName
    slug: Slug
    description: Optional[Description] = None
    parent_id: Optional[CategoryId] = None
    created_by: UserId
    created_at: datetime

    @model_validator(mode="after")
    def validate_hierarchy(self) -> "Category":
        """Reject a category that is its own parent."""
        if self.parent_id is not None and self.parent_id == self.id:
            raise ValidationError(
                CATEGORY_CIRCULAR_REFERENCE,
                operation="Category.validate_hierarchy",
            )
        return self

    @classmethod
    def create(
        cls,
        *,
        id: CategoryId,
        name: CategoryName | str,
        created_by: UserId,
        clock: Clock,
        description: Description | str | None = None,
        parent_id: CategoryId | None = None,
    ) -> "Category":
        """Create a validated category, deriving its slug from the name.

        Raises:
            DomainError: If any field is invalid or no slug can be derived
        """
        try:
            if not isinstance(name, CategoryName):
                name = CategoryName(name)
            if isinstance(description, str):
                description = Description(description)
            return cls(
                id=id,
                name=name,
                slug=Slug.from_text(name.root),
                description=description,
                parent_id=parent_id,
                created_by=created_by,
                created_at=clock.now(),
            )
        except DomainError as err:
            raise DomainError(operation="Category.create") from err

    @property
    def is_root(self) -> bool:
        """Top-level category (a language level such as A1)."""
        return self.parent_id is None

    @property
    def has_parent(self) -> bool:
        return self.parent_id is not None

    def __str__(self) -> str:
        if self.parent_id is None:
            return (
                f"Category(id={self.id.root!r}, name={self.name.root!r}, "
                f"slug={self.slug.root!r}, root=True)"
            )
        return (
            f"Category(id={self.id.root!r}, name={self.name.root!r}, "
            f"slug={self.slug.root!r}, parent={self.parent_id.root!r})"
        )
