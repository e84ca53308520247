"""Unit tests for CategoryService."""

import pytest

from fla.domain.clock import Clock
from fla.domain.error import (
    ConflictError,
    DomainError,
    ErrorCode,
    NotFoundError,
    ValidationError,
    error_code,
)
from fla.domain.model.category import (
    CATEGORY_MAX_DEPTH_EXCEEDED,
    CATEGORY_SLUG_NOT_UNIQUE,
)
from fla.domain.repository import CategoryRepository
from fla.domain.service import CategoryService
from fla.domain.value import CategoryId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN = UserId("admin-1")


class TestCreateCategory:
    """Tests for create_category."""

    @pytest.mark.asyncio
    async def test_create_root_category(self, unit_env):
        # Arrange
        service = await unit_env.get(CategoryService)
        repo = await unit_env.get(CategoryRepository)
        clock = await unit_env.get(Clock)

        # Act
        category = await service.create_category("A1", ADMIN, description="Débutant")

        # Assert
        assert category.slug.root == "a1"
        assert category.is_root
        assert category.description.root == "Débutant"
        assert category.created_at == clock.now()
        assert await repo.find_by_id(category.id) == category

    @pytest.mark.asyncio
    async def test_create_nested_categories(self, unit_env):
        service = await unit_env.get(CategoryService)

        a1 = await service.create_category("A1", ADMIN)
        reading = await service.create_category("Compréhension écrite", ADMIN, parent_id=a1.id)
        sports = await service.create_category("Sports", ADMIN, parent_id=reading.id)

        assert reading.parent_id == a1.id
        assert sports.parent_id == reading.id
        assert reading.slug.root == "comprehension-ecrite"

    @pytest.mark.asyncio
    async def test_fourth_level_is_rejected(self, unit_env):
        service = await unit_env.get(CategoryService)
        a1 = await service.create_category("A1", ADMIN)
        reading = await service.create_category("Lecture", ADMIN, parent_id=a1.id)
        sports = await service.create_category("Sports", ADMIN, parent_id=reading.id)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_category("Football", ADMIN, parent_id=sports.id)

        assert exc_info.value.message == CATEGORY_MAX_DEPTH_EXCEEDED

    @pytest.mark.asyncio
    async def test_missing_parent_is_not_found(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError):
            await service.create_category("Sports", ADMIN, parent_id=CategoryId("missing"))

    @pytest.mark.asyncio
    async def test_duplicate_slug_under_same_parent(self, unit_env):
        service = await unit_env.get(CategoryService)
        a1 = await service.create_category("A1", ADMIN)
        await service.create_category("Culture", ADMIN, parent_id=a1.id)

        with pytest.raises(ConflictError) as exc_info:
            await service.create_category("culture", ADMIN, parent_id=a1.id)

        assert exc_info.value.message == CATEGORY_SLUG_NOT_UNIQUE

    @pytest.mark.asyncio
    async def test_same_slug_under_different_parents(self, unit_env):
        """Slugs only need to be unique among siblings."""
        service = await unit_env.get(CategoryService)
        a1 = await service.create_category("A1", ADMIN)
        a2 = await service.create_category("A2", ADMIN)

        first = await service.create_category("Culture", ADMIN, parent_id=a1.id)
        second = await service.create_category("Culture", ADMIN, parent_id=a2.id)

        assert first.slug == second.slug
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_duplicate_root_slug(self, unit_env):
        service = await unit_env.get(CategoryService)
        await service.create_category("A1", ADMIN)

        with pytest.raises(ConflictError):
            await service.create_category("a1", ADMIN)

    @pytest.mark.asyncio
    async def test_invalid_name_is_wrapped(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(DomainError) as exc_info:
            await service.create_category("   ", ADMIN)

        assert error_code(exc_info.value) is ErrorCode.INVALID


class TestQueries:
    """Tests for the category read operations."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        service = await unit_env.get(CategoryService)
        created = await service.create_category("A1", ADMIN)

        assert await service.get_by_id(created.id) == created

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(CategoryId("missing"))

    @pytest.mark.asyncio
    async def test_get_children_and_roots(self, unit_env):
        service = await unit_env.get(CategoryService)
        a2 = await service.create_category("A2", ADMIN)
        a1 = await service.create_category("A1", ADMIN)
        writing = await service.create_category("Production écrite", ADMIN, parent_id=a1.id)
        reading = await service.create_category("Compréhension écrite", ADMIN, parent_id=a1.id)

        assert await service.get_children(a1.id) == [reading, writing]
        assert await service.get_children(a2.id) == []
        assert await service.get_root_categories() == [a1, a2]

    @pytest.mark.asyncio
    async def test_get_children_of_missing_category(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError):
            await service.get_children(CategoryId("missing"))
