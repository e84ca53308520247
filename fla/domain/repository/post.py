"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from fla.domain.model.post import Post
from fla.domain.value import CategoryId, PostId, Slug


class PostRepository(ABC):
    """Repository interface for Post aggregate."""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save or update a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        pass

    @abstractmethod
    async def find_by_category(self, category_id: CategoryId) -> list[Post]:
        """Find posts filed under a category, newest first."""
        pass

    @abstractmethod
    async def find_scheduled_before(self, moment: datetime) -> list[Post]:
        """Find scheduled posts whose publication date is not after ``moment``.

        Args:
            moment: Cut-off time, usually the current clock time

        Returns:
            Posts ordered by publication date
        """
        pass

    @abstractmethod
    async def is_slug_unique(
        self, slug: Slug, exclude_id: Optional[PostId] = None
    ) -> bool:
        """Check that no other post uses ``slug``.

        Args:
            slug: Candidate slug
            exclude_id: Post to ignore, for updates of an existing post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        pass
