"""In-memory implementation of Category repository."""

from typing import Optional

from fla.domain.error import InternalError, NotFoundError
from fla.domain.model.category import Category
from fla.domain.model.path import CategoryPath
from fla.domain.repository.category import CategoryRepository
from fla.domain.value import CategoryId, Slug

CATEGORY_CYCLE_DETECTED = "Category hierarchy contains a cycle."


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}

    async def save(self, category: Category) -> Category:
        self._categories[category.id] = category
        return category

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        return self._categories.get(category_id)

    async def find_all(self) -> list[Category]:
        return sorted(self._categories.values(), key=lambda c: c.name.root)

    async def delete(self, category_id: CategoryId) -> None:
        self._categories.pop(category_id, None)

    async def find_children(self, category_id: CategoryId) -> list[Category]:
        children = [c for c in self._categories.values() if c.parent_id == category_id]
        return sorted(children, key=lambda c: c.name.root)

    async def find_roots(self) -> list[Category]:
        roots = [c for c in self._categories.values() if c.is_root]
        return sorted(roots, key=lambda c: c.name.root)

    async def build_path(self, category_id: CategoryId) -> CategoryPath:
        """Walk parent links from the leaf up to the root."""
        op = "InMemoryCategoryRepository.build_path"
        chain: list[Category] = []
        seen: set[CategoryId] = set()
        current_id: Optional[CategoryId] = category_id

        while current_id is not None:
            if current_id in seen:
                raise InternalError(CATEGORY_CYCLE_DETECTED, operation=op)
            seen.add(current_id)

            category = self._categories.get(current_id)
            if category is None:
                raise NotFoundError("Category", current_id.root, operation=op)
            chain.append(category)
            current_id = category.parent_id

        return CategoryPath(tuple(reversed(chain)))

    async def find_by_path(self, segments: list[str]) -> Optional[Category]:
        """Match slugs level by level, starting from the roots."""
        parent_id: Optional[CategoryId] = None
        found: Optional[Category] = None

        for segment in segments:
            found = next(
                (
                    c
                    for c in self._categories.values()
                    if c.parent_id == parent_id and c.slug.root == segment
                ),
                None,
            )
            if found is None:
                return None
            parent_id = found.id

        return found

    async def is_slug_unique_in_parent(
        self, slug: Slug, parent_id: Optional[CategoryId]
    ) -> bool:
        return not any(
            c.slug == slug and c.parent_id == parent_id
            for c in self._categories.values()
        )
