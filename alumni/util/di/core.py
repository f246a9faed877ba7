"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from alumni.config import Settings, VoteClientSettings
from alumni.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_vote_client_settings(self, settings: Settings) -> VoteClientSettings:
        """Provide vote client settings."""
        return settings.vote_client
