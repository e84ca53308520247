"""Domain layer DI providers."""

from dishka import Scope, provide

from fla.domain.clock import Clock
from fla.domain.repository import (
    CategoryRepository,
    PostRepository,
    SubscriptionRepository,
    TagRepository,
    UserRepository,
)
from fla.domain.service import (
    CategoryPathService,
    CategoryService,
    PostService,
    SubscriptionService,
    TagService,
    UserService,
)
from fla.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository, clock: Clock
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository, clock=clock)

    @provide
    def get_path_service(
        self, category_repository: CategoryRepository
    ) -> CategoryPathService:
        """Provide category path service."""
        return CategoryPathService(category_repository=category_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
        clock: Clock,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            category_repository=category_repository,
            clock=clock,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository, clock: Clock) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository, clock=clock)

    @provide
    def get_subscription_service(
        self, subscription_repository: SubscriptionRepository, clock: Clock
    ) -> SubscriptionService:
        """Provide subscription domain service."""
        return SubscriptionService(
            subscription_repository=subscription_repository, clock=clock
        )
