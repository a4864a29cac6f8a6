"""Tests for provider selection and config checks."""

import pytest

from inkwell.config import Settings
from inkwell.util.di import PROVIDERS, PersistenceProvider, ProviderBase, get_provider
from inkwell.util.di.core import ProdConfigProvider, load_settings
from inkwell.util.di.infrastructure import ProdPersistenceProvider
from inkwell.util.error import ConfigurationError, DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class _StorageProvider(ProviderBase):
    __mock_component__ = "storage"


class _ProdStorageProvider(_StorageProvider):
    __is_mock__ = False


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_missing_implementation_raises(self):
        with pytest.raises(DependencyInjectionError, match="storage"):
            get_provider(_StorageProvider, use_mock=True)

    def test_unknown_unmock_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})

    def test_persistence_is_the_only_mockable_component(self):
        mockable = [p for p in PROVIDERS if p.__subclasses__()]

        assert mockable == [PersistenceProvider]


class TestLoadSettings:
    """Tests for settings checks at startup."""

    def test_production_requires_jwt_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("AUTH__JWT_SECRET", raising=False)

        with pytest.raises(ConfigurationError):
            load_settings()

    def test_production_with_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("AUTH__JWT_SECRET", "a-real-secret-of-reasonable-length")

        settings = load_settings()

        assert isinstance(settings, Settings)
        assert settings.is_production
        assert settings.api.protocol == "https"

    def test_development_defaults(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = load_settings()

        assert settings.comments.deleted_placeholder == "[deleted]"
        assert settings.catalog.max_page_size == 100
