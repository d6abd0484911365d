"""Auth platform adapter."""

from .auth import MockPlatformAuthClient, PlatformAuthClient, RealPlatformAuthClient

__all__ = [
    "MockPlatformAuthClient",
    "PlatformAuthClient",
    "RealPlatformAuthClient",
]
