"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from club.adapter.credential import InMemoryCredentialStore
from club.config import ChannelSettings, FeedSettings, Settings
from club.domain.repository.auth import CredentialStore
from club.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide client settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_channel_settings(self, settings: Settings) -> ChannelSettings:
        return settings.channel

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        return settings.feed

    @provide(scope=Scope.APP)
    def provide_credential_store(self) -> CredentialStore:
        """Token store shared by the REST gateway and the session."""
        return InMemoryCredentialStore()
