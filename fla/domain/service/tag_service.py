"""Tag domain service."""

import logfire

from fla.domain.clock import Clock
from fla.domain.error import ConflictError, NotAuthorizedError
from fla.domain.model.permissions import EDITORIAL_ROLES, PermissionChecker
from fla.domain.model.tag import Tag
from fla.domain.repository.tag import TagRepository
from fla.domain.value import TagId, TagName

from .base import Service

TAG_CANNOT_CREATE = "User cannot manage tags."
TAG_NAME_EXISTS = "Tag already exists."


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository, clock: Clock) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            clock: Time source for creation timestamps
        """
        self.tag_repository = tag_repository
        self.clock = clock

    async def create_tag(self, name: TagName | str, actor: PermissionChecker) -> Tag:
        """Create a tag. Only admins and editors manage tags.

        Raises:
            NotAuthorizedError: If the actor lacks an editorial role
            DomainError: If the name is invalid
            ConflictError: If a tag with the same name exists
        """
        op = "TagService.create_tag"
        with logfire.span("tag_service.create_tag", actor_id=str(actor.get_id())):
            if not actor.has_any_role(*EDITORIAL_ROLES):
                logfire.warn("Tag creation refused", actor_id=str(actor.get_id()))
                raise NotAuthorizedError(TAG_CANNOT_CREATE, operation=op)

            tag = Tag.create(
                id=TagId.generate(), name=name, created_by=actor.get_id(), clock=self.clock
            )
            if await self.tag_repository.find_by_name(tag.name) is not None:
                raise ConflictError(TAG_NAME_EXISTS, operation=op)

            saved = await self.tag_repository.save(tag)
            logfire.info("Tag created", tag_name=saved.name.root)
            return saved

    async def get_all_tags(self, limit: int = 100) -> list[Tag]:
        """Get all available tags, ordered by name.

        Args:
            limit: Maximum number of tags to return
        """
        with logfire.span("tag_service.get_all_tags", limit=limit):
            tags = await self.tag_repository.find_all(limit=limit)
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_tag_by_name(self, name: TagName) -> Tag | None:
        """Get a tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        with logfire.span("tag_service.get_tag_by_name", tag_name=name.root):
            tag = await self.tag_repository.find_by_name(name)
            if tag:
                logfire.info("Tag found", tag_name=name.root)
            else:
                logfire.warn("Tag not found", tag_name=name.root)
            return tag
