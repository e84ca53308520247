"""Approve post use case."""

import logfire
from pydantic import BaseModel

from fla.application.usecase.base import BaseUseCase
from fla.application.usecase.post.response import PostWorkflowResponse
from fla.domain.service import PostService, UserService
from fla.domain.value import PostId, UserId


class ApprovePostRequest(BaseModel):
    """Approve post request."""

    post_id: str
    approver_id: str


class ApprovePostUseCase(BaseUseCase[ApprovePostRequest, PostWorkflowResponse]):
    """Use case for editorial approval of a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ApprovePostRequest) -> PostWorkflowResponse:
        """Raises NotFoundError for unknown users or posts, NotAuthorizedError
        when the approver may not approve the post."""
        approver = await self.user_service.get_by_id(UserId(request.approver_id))

        with logfire.span("approve_post.execute", post_id=request.post_id):
            post = await self.post_service.approve_post(
                PostId(request.post_id), approver
            )
            return PostWorkflowResponse.from_post(post)
