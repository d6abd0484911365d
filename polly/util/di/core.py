"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from polly.config import (
    PlatformSettings,
    RateLimitSettings,
    Settings,
    VotingSettings,
)
from polly.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded once from the environment and ``.env``."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_platform_settings(self, settings: Settings) -> PlatformSettings:
        return settings.platform

    @provide
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        return settings.rate_limit

    @provide
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        return settings.voting
