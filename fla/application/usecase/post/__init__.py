"""Post use cases."""

from .approve_post import ApprovePostRequest, ApprovePostUseCase
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .publish_post import PublishPostRequest, PublishPostUseCase
from .response import PostWorkflowResponse
from .schedule_post import SchedulePostRequest, SchedulePostUseCase

__all__ = [
    "ApprovePostRequest",
    "ApprovePostUseCase",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "PostWorkflowResponse",
    "PublishPostRequest",
    "PublishPostUseCase",
    "SchedulePostRequest",
    "SchedulePostUseCase",
]
