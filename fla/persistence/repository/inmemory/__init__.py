"""In-memory repository implementations."""

from .category import InMemoryCategoryRepository
from .post import InMemoryPostRepository
from .subscription import InMemorySubscriptionRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryPostRepository",
    "InMemorySubscriptionRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
