"""Category domain service."""

from typing import Optional

import logfire

from fla.domain.clock import Clock
from fla.domain.error import ConflictError, ValidationError
from fla.domain.model.category import (
    CATEGORY_MAX_DEPTH_EXCEEDED,
    CATEGORY_SLUG_NOT_UNIQUE,
    MAX_CATEGORY_DEPTH,
    Category,
)
from fla.domain.repository.category import CategoryRepository
from fla.domain.value import CategoryId, CategoryName, Description, UserId

from .base import Service


class CategoryService(Service):
    """Domain service for the category tree."""

    def __init__(self, category_repository: CategoryRepository, clock: Clock) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
            clock: Time source for creation timestamps
        """
        self.category_repository = category_repository
        self.clock = clock

    async def create_category(
        self,
        name: CategoryName | str,
        created_by: UserId,
        description: Description | str | None = None,
        parent_id: Optional[CategoryId] = None,
    ) -> Category:
        """Create a category under an optional parent.

        Args:
            name: Display name; the slug is derived from it
            created_by: Creating user
            description: Optional description
            parent_id: Parent category, None for a root category

        Returns:
            Saved category

        Raises:
            DomainError: If the name or description is invalid
            NotFoundError: If the parent does not exist
            ValidationError: If the tree would exceed the maximum depth
            ConflictError: If a sibling already uses the same slug
        """
        op = "CategoryService.create_category"
        with logfire.span(
            "category_service.create_category",
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id is not None:
                self.require(
                    await self.category_repository.find_by_id(parent_id),
                    "Category",
                    parent_id,
                    operation=op,
                )
                parent_path = await self.category_repository.build_path(parent_id)
                if len(parent_path) + 1 > MAX_CATEGORY_DEPTH:
                    logfire.warn(
                        "Category depth exceeded",
                        parent_id=str(parent_id),
                        parent_depth=parent_path.depth(),
                    )
                    raise ValidationError(CATEGORY_MAX_DEPTH_EXCEEDED, operation=op)

            category = Category.create(
                id=CategoryId.generate(),
                name=name,
                description=description,
                parent_id=parent_id,
                created_by=created_by,
                clock=self.clock,
            )

            if not await self.category_repository.is_slug_unique_in_parent(
                category.slug, parent_id
            ):
                logfire.warn("Category slug taken", slug=category.slug.root)
                raise ConflictError(CATEGORY_SLUG_NOT_UNIQUE, operation=op)

            saved = await self.category_repository.save(category)
            logfire.info(
                "Category created",
                category_id=str(saved.id),
                slug=saved.slug.root,
            )
            return saved

    async def get_by_id(self, category_id: CategoryId) -> Category:
        """Get category by ID.

        Raises:
            NotFoundError: If category not found
        """
        with logfire.span("category_service.get_by_id", category_id=str(category_id)):
            return self.require(
                await self.category_repository.find_by_id(category_id),
                "Category",
                category_id,
            )

    async def get_children(self, category_id: CategoryId) -> list[Category]:
        """Get direct subcategories of an existing category.

        Raises:
            NotFoundError: If the category does not exist
        """
        with logfire.span(
            "category_service.get_children", category_id=str(category_id)
        ):
            await self.get_by_id(category_id)
            children = await self.category_repository.find_children(category_id)
            logfire.info("Children retrieved", count=len(children))
            return children

    async def get_root_categories(self) -> list[Category]:
        with logfire.span("category_service.get_root_categories"):
            roots = await self.category_repository.find_roots()
            logfire.info("Root categories retrieved", count=len(roots))
            return roots
