"""Dependency injection module."""

from typing import Type

from polly.util.di.application import ProdApplicationProvider
from polly.util.di.base import Component, ProviderBase
from polly.util.di.core import ProdConfigProvider
from polly.util.di.domain import ProdDomainProvider
from polly.util.di.infrastructure import (
    PersistenceProvider,
    PlatformProvider,
    ProdPersistenceProvider,
    ProdPlatformProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    PlatformProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for ``base``.

    A base without subclasses is concrete and used as-is. Otherwise it is a
    mockable component and the subclass whose ``__is_mock__`` matches
    ``use_mock`` is picked.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    # Infrastructure base classes
    "PersistenceProvider",
    "PlatformProvider",
    # Infrastructure implementations
    "ProdPersistenceProvider",
    "ProdPlatformProvider",
]
