"""Dependency injection wiring."""

from hunt.util.di.application import ProdApplicationProvider
from hunt.util.di.base import Component, ProviderBase
from hunt.util.di.core import ProdConfigProvider
from hunt.util.di.domain import ProdDomainProvider
from hunt.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

# Concrete providers, then the swappable infrastructure components
PROVIDERS: tuple[type[ProviderBase], ...] = (
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    StorageProvider,
)


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation loaded."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "StorageProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
