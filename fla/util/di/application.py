"""Application layer DI providers."""

from dishka import Scope, provide

from fla.application.usecase.category import (
    CreateCategoryUseCase,
    GetBreadcrumbsUseCase,
    ResolveCategoryUseCase,
)
from fla.application.usecase.post import (
    ApprovePostUseCase,
    CreatePostUseCase,
    PublishPostUseCase,
    SchedulePostUseCase,
)
from fla.domain.service import (
    CategoryPathService,
    CategoryService,
    PostService,
    UserService,
)
from fla.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Category use cases
    @provide(scope=Scope.REQUEST)
    def get_create_category_use_case(
        self,
        category_service: CategoryService,
        path_service: CategoryPathService,
        user_service: UserService,
    ) -> CreateCategoryUseCase:
        """Provide create category use case."""
        return CreateCategoryUseCase(
            category_service=category_service,
            path_service=path_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_breadcrumbs_use_case(
        self, path_service: CategoryPathService
    ) -> GetBreadcrumbsUseCase:
        """Provide get breadcrumbs use case."""
        return GetBreadcrumbsUseCase(path_service=path_service)

    @provide(scope=Scope.REQUEST)
    def get_resolve_category_use_case(
        self, path_service: CategoryPathService
    ) -> ResolveCategoryUseCase:
        """Provide resolve category use case."""
        return ResolveCategoryUseCase(path_service=path_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        path_service: CategoryPathService,
        user_service: UserService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            path_service=path_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_approve_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ApprovePostUseCase:
        """Provide approve post use case."""
        return ApprovePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_publish_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> PublishPostUseCase:
        """Provide publish post use case."""
        return PublishPostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_schedule_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> SchedulePostUseCase:
        """Provide schedule post use case."""
        return SchedulePostUseCase(post_service=post_service, user_service=user_service)
