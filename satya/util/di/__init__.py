"""Dependency injection: provider registry and implementation selection."""

from collections.abc import Collection
from typing import Type

from satya.util.di.application import ProdApplicationProvider
from satya.util.di.base import COMPONENTS, Component, ProviderBase
from satya.util.di.core import ProdConfigProvider
from satya.util.di.domain import ProdDomainProvider
from satya.util.di.infrastructure import (
    PersistenceProvider,
    PlatformProvider,
    ProdPersistenceProvider,
    ProdPlatformProvider,
)

# Container layout, in resolution order
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    PlatformProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Mock subclasses are only visible once their module is imported
    (``tests.di`` does this).

    Raises:
        ValueError: If the component lacks the requested implementation
    """
    implementations = {impl.__is_mock__: impl for impl in base.__subclasses__()}
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        name = base.__mock_component__ or base.__name__
        raise ValueError(f"No {kind} implementation for {name}") from None


def resolve_providers(
    mocked: Collection[Component] = (),
) -> list[Type[ProviderBase]]:
    """Pick one provider class per registry entry.

    Args:
        mocked: Components served by their mock implementation

    Raises:
        ValueError: If ``mocked`` names an unknown component
    """
    unknown = set(mocked) - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "PlatformProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdPlatformProvider",
    "ProviderBase",
    "get_provider",
    "resolve_providers",
]
