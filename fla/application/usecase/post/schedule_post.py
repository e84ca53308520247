"""Schedule post use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from fla.application.usecase.base import BaseUseCase
from fla.application.usecase.post.response import PostWorkflowResponse
from fla.domain.service import PostService, UserService
from fla.domain.value import PostId, UserId


class SchedulePostRequest(BaseModel):
    """Schedule post request."""

    post_id: str
    actor_id: str
    publish_at: datetime  # Naive values are read as UTC


class SchedulePostUseCase(BaseUseCase[SchedulePostRequest, PostWorkflowResponse]):
    """Use case for queueing a post for future publication."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: SchedulePostRequest) -> PostWorkflowResponse:
        """Raises ValidationError when ``publish_at`` is not in the future."""
        actor = await self.user_service.get_by_id(UserId(request.actor_id))

        with logfire.span(
            "schedule_post.execute",
            post_id=request.post_id,
            publish_at=request.publish_at.isoformat(),
        ):
            post = await self.post_service.schedule_post(
                PostId(request.post_id), request.publish_at, actor
            )
            return PostWorkflowResponse.from_post(post)
