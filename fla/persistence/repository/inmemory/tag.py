"""In-memory implementation of Tag repository."""

from typing import Optional

from fla.domain.model.tag import Tag
from fla.domain.repository.tag import TagRepository
from fla.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository."""

    def __init__(self) -> None:
        self._tags: dict[TagId, Tag] = {}
        self._name_index: dict[str, TagId] = {}

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._tags[tag.id] = tag
        self._name_index[tag.name.root.lower()] = tag.id
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        return self._tags.get(tag_id)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        tag_id = self._name_index.get(name.root.lower())
        if tag_id:
            return self._tags.get(tag_id)
        return None

    async def find_all(self, limit: int = 100) -> list[Tag]:
        tags = sorted(self._tags.values(), key=lambda t: t.name.root)
        return tags[:limit]

    async def delete(self, tag_id: TagId) -> None:
        tag = self._tags.pop(tag_id, None)
        if tag:
            self._name_index.pop(tag.name.root.lower(), None)
