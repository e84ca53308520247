"""Create category use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from fla.application.usecase.base import BaseUseCase
from fla.domain.error import NotAuthorizedError
from fla.domain.service import CategoryPathService, CategoryService, UserService
from fla.domain.value import CategoryId, UserId

CATEGORY_CANNOT_MANAGE = "User cannot manage categories."


class CreateCategoryRequest(BaseModel):
    """Create category request."""

    name: str
    created_by: str  # User ID of the authenticated user
    description: str | None = None
    parent_id: str | None = None  # None creates a root category


class CreateCategoryResponse(BaseModel):
    """Create category response."""

    category_id: str
    name: str
    slug: str
    url: str
    parent_id: str | None
    created_at: datetime


class CreateCategoryUseCase(
    BaseUseCase[CreateCategoryRequest, CreateCategoryResponse]
):
    """Use case for adding a category to the tree."""

    def __init__(
        self,
        category_service: CategoryService,
        path_service: CategoryPathService,
        user_service: UserService,
    ) -> None:
        self.category_service = category_service
        self.path_service = path_service
        self.user_service = user_service

    async def execute(self, request: CreateCategoryRequest) -> CreateCategoryResponse:
        """Execute create category flow.

        Steps:
        1. Load the creating user and check they manage categories
        2. Create the category (parent, depth and slug checks)
        3. Build its URL path

        Raises:
            NotFoundError: If the user or parent category does not exist
            NotAuthorizedError: If the user cannot manage categories
            DomainError: If the category is invalid or conflicts with a sibling
        """
        user = await self.user_service.get_by_id(UserId(request.created_by))

        with logfire.span(
            "create_category.execute", name=request.name, parent_id=request.parent_id
        ):
            if not user.can_manage_categories():
                raise NotAuthorizedError(
                    CATEGORY_CANNOT_MANAGE, operation="CreateCategoryUseCase.execute"
                )

            parent_id = CategoryId(request.parent_id) if request.parent_id else None
            category = await self.category_service.create_category(
                name=request.name,
                created_by=user.id,
                description=request.description,
                parent_id=parent_id,
            )
            url = await self.path_service.build_url(category.id)

            logfire.info("Category created successfully", url=url)

            return CreateCategoryResponse(
                category_id=str(category.id),
                name=category.name.root,
                slug=category.slug.root,
                url=url,
                parent_id=str(category.parent_id) if category.parent_id else None,
                created_at=category.created_at,
            )
