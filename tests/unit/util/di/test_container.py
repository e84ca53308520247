"""Unit tests for provider selection and container assembly."""

import pytest

from fla.application.usecase.category import CreateCategoryUseCase
from fla.config import Settings
from fla.domain.clock import Clock, FixedClock, SystemClock
from fla.domain.repository import CategoryRepository
from fla.util.di import (
    ClockProvider,
    PersistenceProvider,
    ProdClockProvider,
    ProdConfigProvider,
    ProviderBase,
    get_provider,
)
from fla.util.di.container import create_container
from fla.util.error import DependencyInjectionError
from tests.di import MockClockProvider, MockPersistenceProvider, build_test_container


class OrphanProvider(ProviderBase):
    """Mockable component with only a mock implementation."""

    __mock_component__ = "clock"


class OrphanMockProvider(OrphanProvider):
    __is_mock__ = True


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_by_mock_flag(self):
        assert get_provider(ClockProvider, use_mock=False) is ProdClockProvider
        assert get_provider(ClockProvider, use_mock=True) is MockClockProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_missing_implementation(self):
        with pytest.raises(DependencyInjectionError):
            get_provider(OrphanProvider, use_mock=False)


class TestContainers:
    """Tests for the production and test containers."""

    @pytest.mark.asyncio
    async def test_production_container(self):
        container = create_container()

        try:
            assert isinstance(await container.get(Clock), SystemClock)
            assert isinstance(await container.get(Settings), Settings)
            async with container() as request_container:
                first = await request_container.get(CategoryRepository)
                assert await request_container.get(CreateCategoryUseCase) is not None
            async with container() as request_container:
                # Production repositories live for the whole process
                assert await request_container.get(CategoryRepository) is first
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_test_container_isolates_requests(self):
        container = build_test_container()

        try:
            assert isinstance(await container.get(Clock), FixedClock)
            async with container() as request_container:
                first = await request_container.get(CategoryRepository)
            async with container() as request_container:
                assert await request_container.get(CategoryRepository) is not first
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_unmock_clock(self):
        container = build_test_container(unmock={"clock"})

        try:
            assert isinstance(await container.get(Clock), SystemClock)
        finally:
            await container.close()

    def test_unknown_component(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"mailer"})
