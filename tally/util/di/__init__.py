"""Dependency injection module.

Providers fall into two groups. Concrete providers (config, domain,
application, events) are used as they are. Mockable components, currently
only persistence, are declared as a base class whose subclasses are the
production and mock implementations; `get_provider` picks between them.
"""

from typing import Type

from tally.util.di.application import ProdApplicationProvider
from tally.util.di.base import Component, ProviderBase
from tally.util.di.core import ProdConfigProvider
from tally.util.di.domain import ProdDomainProvider
from tally.util.di.infrastructure import (
    EventsProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
)
from tally.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EventsProvider,
    PersistenceProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """A provider is mockable when implementations subclass it."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry from PROVIDERS to the class to instantiate.

    Args:
        base: Provider class listed in PROVIDERS
        use_mock: For mockable components, whether to pick the mock

    Returns:
        `base` itself for concrete providers, otherwise the subclass whose
        `__is_mock__` matches `use_mock`

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    if not is_mockable(base):
        return base

    for impl in base.__subclasses__():
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_mockable",
    "EventsProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
