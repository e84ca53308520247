"""Category use cases."""

from .create_category import (
    CreateCategoryRequest,
    CreateCategoryResponse,
    CreateCategoryUseCase,
)
from .get_breadcrumbs import (
    BreadcrumbItem,
    GetBreadcrumbsRequest,
    GetBreadcrumbsResponse,
    GetBreadcrumbsUseCase,
)
from .resolve_category import (
    ResolveCategoryRequest,
    ResolveCategoryResponse,
    ResolveCategoryUseCase,
)

__all__ = [
    "BreadcrumbItem",
    "CreateCategoryRequest",
    "CreateCategoryResponse",
    "CreateCategoryUseCase",
    "GetBreadcrumbsRequest",
    "GetBreadcrumbsResponse",
    "GetBreadcrumbsUseCase",
    "ResolveCategoryRequest",
    "ResolveCategoryResponse",
    "ResolveCategoryUseCase",
]
