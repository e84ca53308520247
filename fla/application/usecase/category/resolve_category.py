"""Resolve category from URL use case."""

import logfire
from pydantic import BaseModel

from fla.application.usecase.base import BaseUseCase
from fla.domain.service import CategoryPathService


class ResolveCategoryRequest(BaseModel):
    """Resolve category request."""

    path: str  # e.g. "/a1/comprehension-ecrite/sports"


class ResolveCategoryResponse(BaseModel):
    """Resolve category response."""

    category_id: str
    name: str
    slug: str
    url: str  # Canonical form of the requested path
    description: str | None


class ResolveCategoryUseCase(
    BaseUseCase[ResolveCategoryRequest, ResolveCategoryResponse]
):
    """Use case for mapping a request path to a category."""

    def __init__(self, path_service: CategoryPathService) -> None:
        self.path_service = path_service

    async def execute(self, request: ResolveCategoryRequest) -> ResolveCategoryResponse:
        """Raises ValidationError for malformed paths, NotFoundError for unknown ones."""
        with logfire.span("resolve_category.execute", path=request.path):
            category = await self.path_service.parse_url(request.path)
            url = await self.path_service.build_url(category.id)

            return ResolveCategoryResponse(
                category_id=str(category.id),
                name=category.name.root,
                slug=category.slug.root,
                url=url,
                description=category.description.root if category.description else None,
            )
