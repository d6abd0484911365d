"""Auth platform infrastructure providers."""

from dishka import Scope, provide

from polly.adapter.platform import RealPlatformAuthClient
from polly.config import PlatformSettings
from polly.domain.service import AuthClient
from polly.util.di.base import ProviderBase


class PlatformProvider(ProviderBase):
    """Auth platform component base."""

    __mock_component__ = "platform"


class ProdPlatformProvider(PlatformProvider):
    """Production provider talking to the managed auth platform."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_auth_client(self, platform_settings: PlatformSettings) -> AuthClient:
        """Provide the platform auth client."""
        return RealPlatformAuthClient(settings=platform_settings)
