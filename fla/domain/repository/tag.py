"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from fla.domain.model.tag import Tag
from fla.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag aggregate."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, ignoring case.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags, ordered by name.

        Args:
            limit: Maximum number of tags to return
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: TagId) -> None:
        pass
