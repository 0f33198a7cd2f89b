"""Dependency injection module."""

from typing import Type

from cats.util.di.application import ProdApplicationProvider
from cats.util.di.base import Component, ProviderBase
from cats.util.di.core import ProdConfigProvider
from cats.util.di.domain import ProdDomainProvider
from cats.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from cats.util.error import DependencyInjectionError

# Container layout, in resolution-independent order. Swappable components are
# listed by their base class and resolved through get_provider.
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Plain providers come back unchanged. For a swappable component, the
    subclass whose ``__is_mock__`` equals ``use_mock`` is returned.

    Raises:
        DependencyInjectionError: If the component lacks that implementation
    """
    if not base.is_swappable():
        return base

    implementations = {impl.__is_mock__: impl for impl in base.__subclasses__()}
    if use_mock not in implementations:
        raise DependencyInjectionError(
            base.__mock_component__ or base.__name__,
            "mock" if use_mock else "production",
        )
    return implementations[use_mock]


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
