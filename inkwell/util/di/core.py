"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from inkwell.config import DEFAULT_JWT_SECRET, AuthSettings, Settings
from inkwell.util.di.base import ProviderBase
from inkwell.util.error import ConfigurationError


def load_settings() -> Settings:
    """Load settings from the environment and refuse unsafe production config.

    Raises:
        ConfigurationError: If production runs with the placeholder JWT secret
    """
    settings = Settings()
    if settings.is_production and settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
    return settings


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return load_settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
