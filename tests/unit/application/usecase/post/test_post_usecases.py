"""Unit tests for the post use cases."""

from datetime import timedelta

import pytest

from fla.application.usecase.post import (
    ApprovePostRequest,
    ApprovePostUseCase,
    CreatePostRequest,
    CreatePostUseCase,
    PublishPostRequest,
    PublishPostUseCase,
    SchedulePostRequest,
    SchedulePostUseCase,
)
from fla.domain.error import (
    DomainError,
    ErrorCode,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
    error_code,
)
from fla.domain.repository import CategoryRepository, UserRepository
from fla.domain.value import Role
from tests.conftest import SAMPLE_CONTENT, make_category, make_user
from tests.di import TEST_NOW
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.fixture
def create_request() -> CreatePostRequest:
    return CreatePostRequest(
        author_id="author-1",
        title="Les verbes du premier groupe",
        content=SAMPLE_CONTENT,
        category_id="reading",
    )


async def seed(unit_env):
    """Store an author, an editor and the A1 -> Compréhension écrite tree."""
    users = await unit_env.get(UserRepository)
    await users.save(make_user(Role.AUTHOR, user_id="author-1"))
    await users.save(make_user(Role.EDITOR, user_id="editor-1"))
    await users.save(make_user(Role.SUBSCRIBER, user_id="reader-1"))

    categories = await unit_env.get(CategoryRepository)
    a1 = await categories.save(make_category("A1", category_id="a1"))
    await categories.save(
        make_category("Compréhension écrite", category_id="reading", parent_id=a1.id)
    )


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_creates_draft(self, unit_env, create_request):
        await seed(unit_env)
        use_case = await unit_env.get(CreatePostUseCase)

        response = await use_case.execute(create_request)

        assert response.slug == "les-verbes-du-premier-groupe"
        assert response.status == "draft"
        assert response.category_url == "a1/comprehension-ecrite"
        assert response.word_count == 67
        assert response.reading_time == 1
        assert response.schema_type == "EducationalContent"
        assert response.created_at == TEST_NOW

    @pytest.mark.asyncio
    async def test_subscriber_is_refused(self, unit_env, create_request):
        await seed(unit_env)
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                create_request.model_copy(update={"author_id": "reader-1"})
            )

    @pytest.mark.asyncio
    async def test_unknown_author(self, unit_env, create_request):
        await seed(unit_env)
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(create_request.model_copy(update={"author_id": "ghost"}))

    @pytest.mark.asyncio
    async def test_non_http_featured_image(self, unit_env, create_request):
        await seed(unit_env)
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(DomainError) as exc_info:
            await use_case.execute(
                create_request.model_copy(update={"featured_image": "ftp://example.com/a.png"})
            )

        assert error_code(exc_info.value) is ErrorCode.INVALID


class TestWorkflowUseCases:
    """Tests for approving, publishing and scheduling through use cases."""

    @pytest.mark.asyncio
    async def test_approve_then_publish(self, unit_env, create_request):
        # Arrange
        await seed(unit_env)
        created = await (await unit_env.get(CreatePostUseCase)).execute(create_request)
        approve = await unit_env.get(ApprovePostUseCase)
        publish = await unit_env.get(PublishPostUseCase)

        # Act
        approved = await approve.execute(
            ApprovePostRequest(post_id=created.post_id, approver_id="editor-1")
        )
        published = await publish.execute(
            PublishPostRequest(post_id=created.post_id, actor_id="editor-1")
        )

        # Assert
        assert approved.is_approved
        assert approved.approved_by == "editor-1"
        assert approved.approved_at == TEST_NOW
        assert approved.status == "draft"
        assert published.status == "published"
        assert published.published_at == TEST_NOW

    @pytest.mark.asyncio
    async def test_author_cannot_approve(self, unit_env, create_request):
        await seed(unit_env)
        created = await (await unit_env.get(CreatePostUseCase)).execute(create_request)
        approve = await unit_env.get(ApprovePostUseCase)

        with pytest.raises(NotAuthorizedError):
            await approve.execute(
                ApprovePostRequest(post_id=created.post_id, approver_id="author-1")
            )

    @pytest.mark.asyncio
    async def test_schedule(self, unit_env, create_request):
        await seed(unit_env)
        created = await (await unit_env.get(CreatePostUseCase)).execute(create_request)
        schedule = await unit_env.get(SchedulePostUseCase)
        publish_at = TEST_NOW + timedelta(days=3)

        response = await schedule.execute(
            SchedulePostRequest(
                post_id=created.post_id, actor_id="editor-1", publish_at=publish_at
            )
        )

        assert response.status == "scheduled"
        assert response.published_at == publish_at

    @pytest.mark.asyncio
    async def test_schedule_naive_datetime_is_utc(self, unit_env, create_request):
        await seed(unit_env)
        created = await (await unit_env.get(CreatePostUseCase)).execute(create_request)
        schedule = await unit_env.get(SchedulePostUseCase)
        publish_at = TEST_NOW + timedelta(hours=2)

        response = await schedule.execute(
            SchedulePostRequest(
                post_id=created.post_id,
                actor_id="editor-1",
                publish_at=publish_at.replace(tzinfo=None),
            )
        )

        assert response.published_at == publish_at

    @pytest.mark.asyncio
    async def test_schedule_in_the_past(self, unit_env, create_request):
        await seed(unit_env)
        created = await (await unit_env.get(CreatePostUseCase)).execute(create_request)
        schedule = await unit_env.get(SchedulePostUseCase)

        with pytest.raises(ValidationError):
            await schedule.execute(
                SchedulePostRequest(
                    post_id=created.post_id,
                    actor_id="editor-1",
                    publish_at=TEST_NOW - timedelta(minutes=1),
                )
            )
