"""Get category breadcrumbs use case."""

from pydantic import BaseModel

from fla.application.usecase.base import BaseUseCase
from fla.domain.service import CategoryPathService
from fla.domain.value import CategoryId


class GetBreadcrumbsRequest(BaseModel):
    """Get breadcrumbs request."""

    category_id: str


class BreadcrumbItem(BaseModel):
    """One navigation element, linking to its own level of the tree."""

    category_id: str
    name: str
    slug: str
    url: str
    level: int
    is_last: bool


class GetBreadcrumbsResponse(BaseModel):
    """Get breadcrumbs response."""

    breadcrumbs: list[BreadcrumbItem]


class GetBreadcrumbsUseCase(
    BaseUseCase[GetBreadcrumbsRequest, GetBreadcrumbsResponse]
):
    """Use case for building category navigation breadcrumbs."""

    def __init__(self, path_service: CategoryPathService) -> None:
        self.path_service = path_service

    async def execute(self, request: GetBreadcrumbsRequest) -> GetBreadcrumbsResponse:
        """Raises NotFoundError if the category or an ancestor is missing."""
        breadcrumbs = await self.path_service.get_breadcrumbs(
            CategoryId(request.category_id)
        )

        items = []
        slugs: list[str] = []
        for crumb in breadcrumbs:
            slugs.append(crumb.category.slug.root)
            items.append(
                BreadcrumbItem(
                    category_id=str(crumb.category.id),
                    name=crumb.category.name.root,
                    slug=crumb.category.slug.root,
                    url="/".join(slugs),
                    level=crumb.level,
                    is_last=crumb.is_last,
                )
            )

        return GetBreadcrumbsResponse(breadcrumbs=items)
