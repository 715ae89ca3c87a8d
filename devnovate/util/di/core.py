"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from devnovate.config import AuthSettings, NotificationSettings, Settings, TrendingSettings
from devnovate.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_notification_settings(self, settings: Settings) -> NotificationSettings:
        """Provide notification settings."""
        return settings.notifications

    @provide(scope=Scope.APP)
    def provide_trending_settings(self, settings: Settings) -> TrendingSettings:
        """Provide trending settings."""
        return settings.trending
