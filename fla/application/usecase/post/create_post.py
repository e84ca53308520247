"""Create post use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from fla.application.usecase.base import BaseUseCase
from fla.domain.service import CategoryPathService, PostService, UserService
from fla.domain.value import CategoryId, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID of the authenticated user
    title: str
    content: str  # Markdown
    category_id: str
    featured_image: str | None = None
    seo_title: str | None = None
    seo_description: str | None = None
    schema_type: str | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: str
    slug: str
    title: str
    status: str
    category_url: str
    word_count: int
    reading_time: int  # Minutes
    schema_type: str
    created_at: datetime


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for drafting a new post."""

    def __init__(
        self,
        post_service: PostService,
        path_service: CategoryPathService,
        user_service: UserService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            path_service: Category path service, for the category URL
            user_service: User domain service
        """
        self.post_service = post_service
        self.path_service = path_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Load the author (via UserService)
        2. Create the draft post (via PostService, which checks the role,
           the category and slug uniqueness)
        3. Build the category URL for the response

        Raises:
            NotFoundError: If the author or category does not exist
            NotAuthorizedError: If the author cannot create posts
            DomainError: If the post is invalid or its slug is taken
        """
        author = await self.user_service.get_by_id(UserId(request.author_id))

        with logfire.span(
            "create_post.execute",
            title=request.title,
            author=author.username.root,
            category_id=request.category_id,
        ):
            post = await self.post_service.create_post(
                author=author,
                title=request.title,
                content=request.content,
                category_id=CategoryId(request.category_id),
                featured_image=request.featured_image,
                seo_title=request.seo_title,
                seo_description=request.seo_description,
                schema_type=request.schema_type,
            )
            category_url = await self.path_service.build_url(post.category.id)

            logfire.info(
                "Post created successfully", post_id=str(post.id), slug=post.slug.root
            )

            return CreatePostResponse(
                post_id=str(post.id),
                slug=post.slug.root,
                title=post.title.root,
                status=post.status.value,
                category_url=category_url,
                word_count=post.word_count(),
                reading_time=post.estimated_reading_time(),
                schema_type=post.effective_schema_type.value,
                created_at=post.created_at,
            )
