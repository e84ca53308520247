"""Publish post use case."""

import logfire
from pydantic import BaseModel

from fla.application.usecase.base import BaseUseCase
from fla.application.usecase.post.response import PostWorkflowResponse
from fla.domain.service import PostService, UserService
from fla.domain.value import PostId, UserId


class PublishPostRequest(BaseModel):
    """Publish post request."""

    post_id: str
    actor_id: str


class PublishPostUseCase(BaseUseCase[PublishPostRequest, PostWorkflowResponse]):
    """Use case for publishing an approved post immediately."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: PublishPostRequest) -> PostWorkflowResponse:
        actor = await self.user_service.get_by_id(UserId(request.actor_id))

        with logfire.span("publish_post.execute", post_id=request.post_id):
            post = await self.post_service.publish_post(PostId(request.post_id), actor)
            return PostWorkflowResponse.from_post(post)
