"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .platform import PlatformProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .platform import ProdPlatformProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "PlatformProvider",
    "ProdPersistenceProvider",
    "ProdPlatformProvider",
]
