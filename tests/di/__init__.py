"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .platform import MockPlatformProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockPlatformProvider",
    "build_test_container",
]
