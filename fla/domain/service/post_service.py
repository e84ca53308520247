"""Post domain service."""

from datetime import datetime
from typing import Optional

import logfire

from fla.domain.clock import Clock
from fla.domain.error import ConflictError, NotAuthorizedError
from fla.domain.model.permissions import PermissionChecker
from fla.domain.model.post import Post
from fla.domain.model.user import User
from fla.domain.repository import CategoryRepository, PostRepository
from fla.domain.value import (
    CategoryId,
    Description,
    PostContent,
    PostId,
    SchemaType,
    Title,
)

from .base import Service

POST_SLUG_NOT_UNIQUE = "Post slug must be unique."
POST_CANNOT_CREATE = "User cannot create posts."


class PostService(Service):
    """Domain service for the post workflow.

    Loads posts, applies the entity's guarded transitions and stores the
    updated copy.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
        clock: Clock,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            category_repository: Category repository, to resolve post categories
            clock: Time source handed to new posts
        """
        self.post_repository = post_repository
        self.category_repository = category_repository
        self.clock = clock

    async def create_post(
        self,
        author: User,
        title: Title | str,
        content: PostContent | str,
        category_id: CategoryId,
        featured_image: Optional[str] = None,
        seo_title: Title | str | None = None,
        seo_description: Description | str | None = None,
        schema_type: SchemaType | str | None = None,
    ) -> Post:
        """Create a draft post owned by ``author``.

        Returns:
            Saved post

        Raises:
            NotAuthorizedError: If the author may not create posts
            NotFoundError: If the category does not exist
            DomainError: If any field is invalid
            ConflictError: If another post already has the derived slug
        """
        op = "PostService.create_post"
        with logfire.span(
            "post_service.create_post",
            author_id=str(author.id),
            category_id=str(category_id),
        ):
            if not author.can_create_post():
                logfire.warn("Post creation refused", author_id=str(author.id))
                raise NotAuthorizedError(POST_CANNOT_CREATE, operation=op)

            category = self.require(
                await self.category_repository.find_by_id(category_id),
                "Category",
                category_id,
                operation=op,
            )

            post = Post.create(
                id=PostId.generate(),
                owner=author.id,
                title=title,
                content=content,
                category=category,
                featured_image=featured_image,
                seo_title=seo_title,
                seo_description=seo_description,
                schema_type=schema_type,
                clock=self.clock,
            )

            if not await self.post_repository.is_slug_unique(post.slug):
                logfire.warn("Post slug taken", slug=post.slug.root)
                raise ConflictError(POST_SLUG_NOT_UNIQUE, operation=op)

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), slug=saved.slug.root)
            return saved

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_id", post_id=str(post_id)):
            return self.require(
                await self.post_repository.find_by_id(post_id), "Post", post_id
            )

    async def approve_post(self, post_id: PostId, approver: PermissionChecker) -> Post:
        with logfire.span(
            "post_service.approve_post",
            post_id=str(post_id),
            approver_id=str(approver.get_id()),
        ):
            post = await self.get_by_id(post_id)
            approved = await self.post_repository.save(post.approve(approver))
            logfire.info("Post approved", post_id=str(post_id))
            return approved

    async def publish_post(self, post_id: PostId, actor: PermissionChecker) -> Post:
        with logfire.span(
            "post_service.publish_post",
            post_id=str(post_id),
            actor_id=str(actor.get_id()),
        ):
            post = await self.get_by_id(post_id)
            published = await self.post_repository.save(post.publish(actor))
            logfire.info("Post published", post_id=str(post_id))
            return published

    async def schedule_post(
        self, post_id: PostId, publish_at: datetime, actor: PermissionChecker
    ) -> Post:
        with logfire.span(
            "post_service.schedule_post",
            post_id=str(post_id),
            publish_at=publish_at.isoformat(),
        ):
            post = await self.get_by_id(post_id)
            scheduled = await self.post_repository.save(post.schedule(publish_at, actor))
            logfire.info("Post scheduled", post_id=str(post_id))
            return scheduled

    async def archive_post(self, post_id: PostId, actor: PermissionChecker) -> Post:
        with logfire.span("post_service.archive_post", post_id=str(post_id)):
            post = await self.get_by_id(post_id)
            archived = await self.post_repository.save(post.archive(actor))
            logfire.info("Post archived", post_id=str(post_id))
            return archived

    async def revert_post_to_draft(
        self, post_id: PostId, actor: PermissionChecker
    ) -> Post:
        with logfire.span("post_service.revert_post_to_draft", post_id=str(post_id)):
            post = await self.get_by_id(post_id)
            draft = await self.post_repository.save(post.revert_to_draft(actor))
            logfire.info("Post reverted to draft", post_id=str(post_id))
            return draft

    async def get_posts_ready_to_publish(self) -> list[Post]:
        """Scheduled posts whose publication time has come.

        Used by the publishing scheduler, which then publishes each one.
        """
        with logfire.span("post_service.get_posts_ready_to_publish"):
            candidates = await self.post_repository.find_scheduled_before(
                self.clock.now()
            )
            ready = [post for post in candidates if post.is_ready_to_publish]
            logfire.info("Posts ready to publish", count=len(ready))
            return ready
