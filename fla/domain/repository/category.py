"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from fla.domain.model.category import Category
from fla.domain.model.path import CategoryPath
from fla.domain.value import CategoryId, Slug


class CategoryRepository(ABC):
    """Repository interface for the Category tree."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save or update a category.

        Args:
            category: Category to save

        Returns:
            Saved category
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID.

        Args:
            category_id: Category identifier

        Returns:
            Category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Find all categories, ordered by name."""
        pass

    @abstractmethod
    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category.

        Args:
            category_id: Category identifier
        """
        pass

    @abstractmethod
    async def find_children(self, category_id: CategoryId) -> list[Category]:
        """Find the direct subcategories of a category.

        Args:
            category_id: Parent category identifier

        Returns:
            Child categories, ordered by name
        """
        pass

    @abstractmethod
    async def find_roots(self) -> list[Category]:
        """Find top-level categories (language levels), ordered by name."""
        pass

    @abstractmethod
    async def build_path(self, category_id: CategoryId) -> CategoryPath:
        """Build the root-to-leaf path ending at a category.

        Args:
            category_id: Leaf category identifier

        Returns:
            Path starting at the root ancestor

        Raises:
            NotFoundError: If the category or one of its ancestors is missing
            InternalError: If stored parent links form a cycle
        """
        pass

    @abstractmethod
    async def find_by_path(self, segments: list[str]) -> Optional[Category]:
        """Find the category addressed by URL slug segments.

        Args:
            segments: Slugs from the root down, e.g. ["a1", "sports"]

        Returns:
            Leaf category if every segment matches, None otherwise
        """
        pass

    @abstractmethod
    async def is_slug_unique_in_parent(
        self, slug: Slug, parent_id: Optional[CategoryId]
    ) -> bool:
        """Check that no sibling under ``parent_id`` already uses ``slug``.

        Args:
            slug: Candidate slug
            parent_id: Parent category, None for root categories

        Returns:
            True if the slug is free at that level
        """
        pass
