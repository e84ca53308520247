"""Persistence infrastructure providers."""

from dishka import Scope, provide

from fla.domain.repository import (
    CategoryRepository,
    PostRepository,
    SubscriptionRepository,
    TagRepository,
    UserRepository,
)
from fla.persistence.repository.inmemory import (
    InMemoryCategoryRepository,
    InMemoryPostRepository,
    InMemorySubscriptionRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from fla.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Storage is in-process: repositories are APP-scoped so data outlives a
    single request.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_user_repository(self) -> UserRepository:
        """Provide User repository."""
        return InMemoryUserRepository()

    @provide
    def get_category_repository(self) -> CategoryRepository:
        """Provide Category repository."""
        return InMemoryCategoryRepository()

    @provide
    def get_post_repository(self) -> PostRepository:
        """Provide Post repository."""
        return InMemoryPostRepository()

    @provide
    def get_tag_repository(self) -> TagRepository:
        """Provide Tag repository."""
        return InMemoryTagRepository()

    @provide
    def get_subscription_repository(self) -> SubscriptionRepository:
        """Provide Subscription repository."""
        return InMemorySubscriptionRepository()
