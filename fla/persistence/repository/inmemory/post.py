"""In-memory implementation of Post repository."""

from datetime import datetime
from typing import Optional

from fla.domain.model.post import Post
from fla.domain.repository.post import PostRepository
from fla.domain.value import CategoryId, PostId, PostStatus, Slug


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def save(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def find_by_category(self, category_id: CategoryId) -> list[Post]:
        posts = [p for p in self._posts.values() if p.category.id == category_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def find_scheduled_before(self, moment: datetime) -> list[Post]:
        posts = [
            p
            for p in self._posts.values()
            if p.status is PostStatus.SCHEDULED
            and p.published_at is not None
            and p.published_at <= moment
        ]
        posts.sort(key=lambda p: p.published_at)  # type: ignore[arg-type, return-value]
        return posts

    async def is_slug_unique(
        self, slug: Slug, exclude_id: Optional[PostId] = None
    ) -> bool:
        return not any(
            p.slug == slug and p.id != exclude_id for p in self._posts.values()
        )

    async def delete(self, post_id: PostId) -> None:
        self._posts.pop(post_id, None)
