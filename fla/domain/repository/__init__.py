"""Repository interfaces for the learning blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from fla.domain.repository.category import CategoryRepository
from fla.domain.repository.post import PostRepository
from fla.domain.repository.subscription import SubscriptionRepository
from fla.domain.repository.tag import TagRepository
from fla.domain.repository.user import UserRepository

__all__ = [
    "CategoryRepository",
    "PostRepository",
    "UserRepository",
    "TagRepository",
    "SubscriptionRepository",
]
