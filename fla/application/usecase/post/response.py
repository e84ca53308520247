"""Shared response model for post workflow use cases."""

from datetime import datetime

from pydantic import BaseModel

from fla.domain.model.post import Post


class PostWorkflowResponse(BaseModel):
    """Workflow state of a post after a transition."""

    post_id: str
    slug: str
    status: str
    is_approved: bool
    approved_by: str | None
    approved_at: datetime | None
    published_at: datetime | None
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostWorkflowResponse":
        return cls(
            post_id=str(post.id),
            slug=post.slug.root,
            status=post.status.value,
            is_approved=post.is_approved,
            approved_by=str(post.approved_by) if post.approved_by else None,
            approved_at=post.approved_at,
            published_at=post.published_at,
            updated_at=post.updated_at,
        )
