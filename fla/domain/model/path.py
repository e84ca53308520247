"""Category paths and breadcrumbs."""

from collections.abc import Iterator
from dataclasses import dataclass

from fla.domain.model.category import MAX_CATEGORY_DEPTH, Category


@dataclass(frozen=True)
class CategoryBreadcrumb:
    """Navigation element for one category of a path.

    ``level`` is the 0-based position in the path (0=A1,
    1=Compréhension écrite, 2=Sports); ``is_last`` marks the target category.
    """

    category: Category
    is_last: bool
    level: int


@dataclass(frozen=True)
class CategoryPath:
    """Ordered chain of categories from the root to a target category."""

    categories: tuple[Category, ...] = ()

    def __str__(self) -> str:
        """Slash-joined slugs, e.g. ``a1/comprehension-ecrite/sports``."""
        return "/".join(category.slug.root for category in self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self.categories)

    def depth(self) -> int:
        """Hierarchy level of the leaf (0 for a root, -1 for an empty path)."""
        return len(self.categories) - 1

    def is_valid_depth(self) -> bool:
        """Whether the path stays within ``MAX_CATEGORY_DEPTH`` levels."""
        return self.depth() <= MAX_CATEGORY_DEPTH - 1

    def leaf(self) -> Category | None:
        """Most specific category of the path, None when empty."""
        if not self.categories:
            return None
        return self.categories[-1]

    def breadcrumbs(self) -> list[CategoryBreadcrumb]:
        last = len(self.categories) - 1
        return [
            CategoryBreadcrumb(category=category, is_last=index == last, level=index)
            for index, category in enumerate(self.categories)
        ]
