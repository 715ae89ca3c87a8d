"""Unit tests for provider selection and container assembly."""

import pytest

from devnovate.domain.repository import BlogRepository
from devnovate.persistence.repository.inmemory import InMemoryBlogRepository
from devnovate.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
    mockable_components,
)
from devnovate.util.di.container import build_container
from tests.di import MockPersistenceProvider


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_used_directly(self):
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_component_selected_by_mock_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert (
            get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        )

    def test_mockable_components(self):
        assert mockable_components() == {"persistence", "notification"}


class TestBuildContainer:
    """Tests for build_container."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_container(mocked={"search"})

    @pytest.mark.asyncio
    async def test_mocked_persistence_resolves_in_memory(self):
        container = build_container(mocked={"persistence", "notification"})
        try:
            async with container() as request_container:
                repo = await request_container.get(BlogRepository)
                assert isinstance(repo, InMemoryBlogRepository)
        finally:
            await container.close()
