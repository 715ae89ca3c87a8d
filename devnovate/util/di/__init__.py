"""Dishka providers for Devnovate.

Every provider class is listed in PROVIDERS. A provider with subclasses is a
mockable component (persistence, notification) whose production and mock
implementations are told apart by `__is_mock__`; a provider without
subclasses is used directly.
"""

from typing import Type

from devnovate.util.di.application import ProdApplicationProvider
from devnovate.util.di.base import Component, ProviderBase
from devnovate.util.di.core import ProdConfigProvider
from devnovate.util.di.domain import ProdDomainProvider
from devnovate.util.di.infrastructure import (
    NotificationProvider,
    PersistenceProvider,
    ProdNotificationProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
    NotificationProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that ship a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider listed in PROVIDERS.

    Mock implementations live under tests/di and are only visible once that
    package has been imported.

    Args:
        base: Entry from PROVIDERS
        use_mock: Select the mock implementation of a mockable component

    Returns:
        Provider class, not instantiated

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]
