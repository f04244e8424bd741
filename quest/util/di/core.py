"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quest.config import AuthSettings, FeedSettings, Settings
from quest.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider, loaded once from the environment and .env file."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        return settings.feed
