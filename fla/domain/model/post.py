"""Post entity and its publication workflow.

A post moves through draft, scheduled, published and archived states. Every
transition goes through :meth:`Post.check_transition_to`, which consults the
status transition table and the actor's roles. Transitions never mutate the
post; they return an updated copy.
"""

import math
from datetime import datetime
from typing import Any, Optional

from pydantic import Field, HttpUrl, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from fla.domain.clock import Clock, as_utc
from fla.domain.error import DomainError, NotAuthorizedError, ValidationError
from fla.domain.model.category import Category
from fla.domain.model.common import DomainModel
from fla.domain.model.permissions import (
    EDITORIAL_ROLES,
    PermissionChecker,
    PostPermissionChecker,
)
from fla.domain.value import (
    Description,
    PostContent,
    PostId,
    PostStatus,
    Role,
    SchemaType,
    Slug,
    Title,
    UserId,
)
from fla.util.markdown import strip_markdown

AVERAGE_WORDS_PER_MINUTE = 200  # Average adult reading speed

POST_INVALID = "Invalid post."
POST_INVALID_STATUS_TRANSITION = "Invalid status transition from {} to {}."
POST_CANNOT_PUBLISH = "User cannot publish this post."
POST_CANNOT_APPROVE = "User cannot approve this post."
POST_CANNOT_SCHEDULE = "User cannot schedule this post."
POST_SCHEDULED_DATE_REQUIRED = "Scheduled date is required for scheduled posts."
POST_SCHEDULED_DATE_PAST = "Scheduled date must be in the future."
POST_APPROVAL_INCOMPLETE = "Approver and approval date must be set together."


class Post(DomainModel):
    """Learning article with SEO metadata and an editorial workflow."""

    # Identity
    id: PostId
    owner: UserId

    # Content
    title: Title
    content: PostContent
    featured_image: Optional[HttpUrl] = None
    status: PostStatus = PostStatus.DRAFT
    slug: Slug
    category: Category

    # SEO and social media, each falling back to a more general field
    seo_title: Optional[Title] = None
    seo_description: Optional[Description] = None
    open_graph_title: Optional[Title] = None
    open_graph_description: Optional[Description] = None
    open_graph_image: Optional[HttpUrl] = None
    canonical_url: Optional[HttpUrl] = None
    schema_type: Optional[SchemaType] = None

    # Publishing workflow
    published_at: Optional[datetime] = None  # None unless published or scheduled
    approved_by: Optional[UserId] = None
    approved_at: Optional[datetime] = None

    created_at: datetime
    updated_at: datetime

    # No default; storage adapters pass it to restore()
    clock: Clock = Field(exclude=True, repr=False)

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: object) -> PostStatus:
        return PostStatus.parse(v)  # type: ignore[arg-type]

    @field_validator("schema_type", mode="before")
    @classmethod
    def parse_schema_type(cls, v: object) -> Optional[SchemaType]:
        if v is None or v == "":
            return None
        return SchemaType.parse(v)  # type: ignore[arg-type]

    @field_validator("published_at", "approved_at", "created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else None

    @model_validator(mode="after")
    def validate_approval(self) -> "Post":
        """Approver and approval date are set together or not at all."""
        if (self.approved_by is None) != (self.approved_at is None):
            raise ValidationError(
                POST_APPROVAL_INCOMPLETE, operation="Post.validate_approval"
            )
        return self

    @classmethod
    def create(
        cls,
        *,
        id: PostId,
        owner: UserId,
        title: Title | str,
        content: PostContent | str,
        category: Category,
        clock: Clock,
        status: PostStatus | str = PostStatus.DRAFT,
        featured_image: HttpUrl | str | None = None,
        published_at: datetime | None = None,
        seo_title: Title | str | None = None,
        seo_description: Description | str | None = None,
        open_graph_title: Title | str | None = None,
        open_graph_description: Description | str | None = None,
        open_graph_image: HttpUrl | str | None = None,
        canonical_url: HttpUrl | str | None = None,
        schema_type: SchemaType | str | None = None,
    ) -> "Post":
        """Create a validated post, deriving its slug from the title.

        New posts are never approved.

        Raises:
            DomainError: If any field or workflow invariant is invalid
        """
        op = "Post.create"
        now = clock.now()
        try:
            if not isinstance(title, Title):
                title = Title(title)
            post = cls(
                id=id,
                owner=owner,
                title=title,
                content=content,
                category=category,
                status=status,
                slug=Slug.from_text(title.root),
                featured_image=featured_image or None,
                published_at=published_at,
                seo_title=seo_title or None,
                seo_description=seo_description or None,
                open_graph_title=open_graph_title or None,
                open_graph_description=open_graph_description or None,
                open_graph_image=open_graph_image or None,
                canonical_url=canonical_url or None,
                schema_type=schema_type,
                created_at=now,
                updated_at=now,
                clock=clock,
            )
            post.ensure_valid()
        except DomainError as err:
            raise DomainError(operation=op) from err
        except PydanticValidationError as err:
            raise ValidationError(POST_INVALID, operation=op) from err
        return post

    @classmethod
    def restore(cls, data: dict[str, Any], clock: Clock) -> "Post":
        """Rebuild a stored post, e.g. from ``model_dump()`` output.

        Unlike :meth:`create`, the stored slug, status and timestamps are
        kept as they are.
        """
        return cls.model_validate({**data, "clock": clock})

    def ensure_valid(self) -> None:
        """Check workflow invariants that depend on the current time.

        Field-level rules are enforced on construction; this adds the rule
        that a scheduled post carries a publication date in the future.

        Raises:
            ValidationError: If the scheduling invariant does not hold
        """
        op = "Post.ensure_valid"
        if self.status is not PostStatus.SCHEDULED:
            return
        if self.published_at is None:
            raise ValidationError(POST_SCHEDULED_DATE_REQUIRED, operation=op)
        if self.published_at <= self.clock.now():
            raise ValidationError(POST_SCHEDULED_DATE_PAST, operation=op)

    # Workflow

    def check_transition_to(
        self, new_status: PostStatus | str, actor: PermissionChecker
    ) -> None:
        """Check that ``actor`` may move this post to ``new_status``.

        Raises:
            ValidationError: If the transition is not in the table, the
                status is unknown, or an unapproved post would be published
            NotAuthorizedError: If the actor lacks an editorial role
        """
        op = "Post.check_transition_to"
        new_status = PostStatus.parse(new_status)
        transition_message = POST_INVALID_STATUS_TRANSITION.format(
            self.status.value, new_status.value
        )

        if not self.status.can_transition_to(new_status):
            raise ValidationError(transition_message, operation=op)

        is_editorial = actor.has_any_role(*EDITORIAL_ROLES)

        if new_status is PostStatus.PUBLISHED:
            if not self.is_approved:
                raise ValidationError(POST_CANNOT_PUBLISH, operation=op)
            if not is_editorial:
                raise NotAuthorizedError(POST_CANNOT_PUBLISH, operation=op)
        elif new_status is PostStatus.SCHEDULED:
            if not is_editorial:
                raise NotAuthorizedError(POST_CANNOT_SCHEDULE, operation=op)
        elif new_status is PostStatus.ARCHIVED:
            if not is_editorial:
                raise NotAuthorizedError(transition_message, operation=op)
        elif new_status is PostStatus.DRAFT:
            # Unpublishing is editorial; leaving other states for draft is not
            if self.status is PostStatus.PUBLISHED and not is_editorial:
                raise NotAuthorizedError(transition_message, operation=op)

    def approve(self, approver: PermissionChecker) -> "Post":
        """Record editorial approval without changing the status.

        Editors cannot approve their own posts; admins can.

        Raises:
            NotAuthorizedError: If the approver may not approve this post
        """
        op = "Post.approve"
        if not approver.has_any_role(*EDITORIAL_ROLES):
            raise NotAuthorizedError(POST_CANNOT_APPROVE, operation=op)
        if self.owner == approver.get_id() and not approver.has_role(Role.ADMIN):
            raise NotAuthorizedError(POST_CANNOT_APPROVE, operation=op)

        now = self.clock.now()
        return self.model_copy(
            update={
                "approved_by": approver.get_id(),
                "approved_at": now,
                "updated_at": now,
            }
        )

    def publish(self, actor: PermissionChecker) -> "Post":
        """Publish immediately, stamping the publication date with now."""
        try:
            self.check_transition_to(PostStatus.PUBLISHED, actor)
        except DomainError as err:
            raise DomainError(operation="Post.publish") from err

        now = self.clock.now()
        return self.model_copy(
            update={
                "status": PostStatus.PUBLISHED,
                "published_at": now,
                "updated_at": now,
            }
        )

    def schedule(self, publish_at: datetime, actor: PermissionChecker) -> "Post":
        """Queue the post for publication at ``publish_at``.

        Raises:
            DomainError: If the transition is refused
            ValidationError: If ``publish_at`` is not strictly in the future
        """
        op = "Post.schedule"
        try:
            self.check_transition_to(PostStatus.SCHEDULED, actor)
        except DomainError as err:
            raise DomainError(operation=op) from err

        publish_at = as_utc(publish_at)
        now = self.clock.now()
        if publish_at <= now:
            raise ValidationError(POST_SCHEDULED_DATE_PAST, operation=op)

        return self.model_copy(
            update={
                "status": PostStatus.SCHEDULED,
                "published_at": publish_at,
                "updated_at": now,
            }
        )

    def archive(self, actor: PermissionChecker) -> "Post":
        try:
            self.check_transition_to(PostStatus.ARCHIVED, actor)
        except DomainError as err:
            raise DomainError(operation="Post.archive") from err

        return self.model_copy(
            update={"status": PostStatus.ARCHIVED, "updated_at": self.clock.now()}
        )

    def revert_to_draft(self, actor: PermissionChecker) -> "Post":
        """Move back to draft, clearing the publication date."""
        try:
            self.check_transition_to(PostStatus.DRAFT, actor)
        except DomainError as err:
            raise DomainError(operation="Post.revert_to_draft") from err

        return self.model_copy(
            update={
                "status": PostStatus.DRAFT,
                "published_at": None,
                "updated_at": self.clock.now(),
            }
        )

    @property
    def is_published(self) -> bool:
        return self.status is PostStatus.PUBLISHED

    @property
    def is_draft(self) -> bool:
        return self.status is PostStatus.DRAFT

    @property
    def is_scheduled(self) -> bool:
        return self.status is PostStatus.SCHEDULED

    @property
    def is_approved(self) -> bool:
        return self.approved_by is not None and self.approved_at is not None

    @property
    def is_ready_to_publish(self) -> bool:
        """True for a scheduled post whose publication time has come."""
        if not self.is_scheduled or self.published_at is None:
            return False
        return self.published_at <= self.clock.now()

    def can_be_edited_by(self, user: PostPermissionChecker) -> bool:
        return user.can_edit_post(self)

    # Reading helpers

    def word_count(self) -> int:
        """Count words in the content with Markdown formatting removed."""
        return len(strip_markdown(self.content.root).split())

    def estimated_reading_time(self) -> int:
        """Reading time in whole minutes, never less than one."""
        minutes = self.word_count() / AVERAGE_WORDS_PER_MINUTE
        return max(1, math.ceil(minutes))

    def get_excerpt(self, max_length: int) -> str:
        """Plain-text preview of at most ``max_length`` characters plus an ellipsis.

        Truncation backs off to the last space when that keeps more than
        half of the allowed length.
        """
        content = strip_markdown(self.content.root)
        if len(content) <= max_length:
            return content

        truncated = content[:max_length]
        last_space = truncated.rfind(" ")
        if last_space > max_length // 2:
            truncated = truncated[:last_space]
        return truncated + "..."

    @property
    def has_featured_image(self) -> bool:
        return self.featured_image is not None

    # Effective SEO values

    @property
    def effective_seo_title(self) -> Title:
        return self.seo_title or self.title

    @property
    def effective_open_graph_title(self) -> Title:
        return self.open_graph_title or self.effective_seo_title

    @property
    def effective_open_graph_description(self) -> Optional[Description]:
        return self.open_graph_description or self.seo_description

    @property
    def effective_open_graph_image(self) -> Optional[HttpUrl]:
        return self.open_graph_image or self.featured_image

    @property
    def effective_schema_type(self) -> SchemaType:
        return self.schema_type or SchemaType.default()

    def __str__(self) -> str:
        max_content_length = 100
        content = self.content.root
        if len(content) > max_content_length:
            content = content[:max_content_length] + "..."
        return (
            f"Post(id={self.id.root!r}, title={self.title.root!r}, "
            f"status={self.status.value!r}, slug={self.slug.root!r}, "
            f"owner={self.owner.root!r}, category={self.category.name.root!r}, "
            f"content={content!r}, word_count={self.word_count()}, "
            f"has_featured_image={self.has_featured_image})"
        )
