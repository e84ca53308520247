"""Category path service: URLs and breadcrumbs for the category tree."""

import re
from urllib.parse import unquote_plus

import logfire

from fla.domain.error import ValidationError
from fla.domain.model.category import Category
from fla.domain.model.path import CategoryBreadcrumb
from fla.domain.repository.category import CategoryRepository
from fla.domain.value import CategoryId

from .base import Service

PATH_EMPTY = "Empty path not supported."
PATH_INVALID_SEGMENT = "Invalid URL segment: {}"

# A percent sign must introduce two hex digits
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_segment(segment: str) -> str:
    """Percent-decode one URL path segment, '+' meaning space.

    Raises:
        ValidationError: If the segment has malformed percent-encoding
    """
    if _BAD_PERCENT_RE.search(segment):
        raise ValidationError(
            PATH_INVALID_SEGMENT.format(segment), operation="decode_segment"
        )
    try:
        return unquote_plus(segment, errors="strict")
    except UnicodeDecodeError:
        raise ValidationError(
            PATH_INVALID_SEGMENT.format(segment), operation="decode_segment"
        ) from None


class CategoryPathService(Service):
    """Builds and resolves hierarchical category URLs.

    The service trusts the paths the repository returns; depth limits are
    enforced when categories are created.
    """

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize path service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def build_url(self, category_id: CategoryId) -> str:
        """Render the URL path of a category, e.g. ``a1/comprehension-ecrite/sports``.

        Raises:
            NotFoundError: If the category or an ancestor is missing
            InternalError: If the stored hierarchy is corrupt
        """
        with logfire.span("path_service.build_url", category_id=str(category_id)):
            path = await self.category_repository.build_path(category_id)
            return str(path)

    async def parse_url(self, url_path: str) -> Category:
        """Resolve a URL path to the category it addresses.

        Leading and trailing slashes are ignored and each segment is
        percent-decoded before lookup.

        Args:
            url_path: Path such as ``/a1/comprehension-ecrite/``

        Returns:
            The leaf category

        Raises:
            ValidationError: If the path is empty or badly encoded
            NotFoundError: If no category matches the path
        """
        with logfire.span("path_service.parse_url", url_path=url_path):
            trimmed = url_path.strip("/")
            if not trimmed:
                raise ValidationError(PATH_EMPTY, operation="CategoryPathService.parse_url")

            segments = [decode_segment(segment) for segment in trimmed.split("/")]
            return self.require(
                await self.category_repository.find_by_path(segments),
                "Category",
                trimmed,
                operation="CategoryPathService.parse_url",
            )

    async def get_breadcrumbs(
        self, category_id: CategoryId
    ) -> list[CategoryBreadcrumb]:
        """Breadcrumbs from the root down to the category."""
        with logfire.span(
            "path_service.get_breadcrumbs", category_id=str(category_id)
        ):
            path = await self.category_repository.build_path(category_id)
            return path.breadcrumbs()
