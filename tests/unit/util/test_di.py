"""Unit tests for provider selection."""

import pytest

from satya.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
    resolve_providers,
)
from tests.di import MockPersistenceProvider, MockPlatformProvider, build_test_container


class TestProviderSelection:
    def test_concrete_provider_used_as_is(self):
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_component_implementations(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_resolve_mocked_components(self):
        providers = resolve_providers({"persistence", "platform"})

        assert MockPersistenceProvider in providers
        assert MockPlatformProvider in providers

    def test_unknown_component(self):
        with pytest.raises(ValueError):
            resolve_providers({"cache"})

        with pytest.raises(ValueError):
            build_test_container(unmock={"cache"})
