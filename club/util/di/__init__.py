"""Dependency injection wiring.

``PROVIDERS`` lists every provider base in one place. Concrete bases are
used as they are; mockable bases resolve to their production or mock
subclass through ``get_provider``.
"""

from typing import Type

from club.util.di.application import ProdApplicationProvider
from club.util.di.base import Component, ProviderBase, component_of, is_mockable
from club.util.di.core import ProdConfigProvider
from club.util.di.infrastructure import (
    ApiProvider,
    ChannelProvider,
    FeedbackProvider,
    ProdApiProvider,
    ProdChannelProvider,
    ProdFeedbackProvider,
)
from club.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdApplicationProvider,
    ApiProvider,
    ChannelProvider,
    FeedbackProvider,
]


def mockable_components() -> set[Component]:
    """Names a test may pass to ``unmock``."""
    names = (component_of(base) for base in PROVIDERS)
    return {name for name in names if name is not None}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Provider class to instantiate for ``base``.

    Raises:
        DependencyInjectionError: If the requested variant is not defined,
            e.g. a mock asked for while the test providers are not imported
    """
    if not is_mockable(base):
        return base

    for variant in base.__subclasses__():
        if variant.__is_mock__ == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} provider for component {component_of(base)!r}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "component_of",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdApplicationProvider",
    "ApiProvider",
    "ChannelProvider",
    "FeedbackProvider",
    "ProdApiProvider",
    "ProdChannelProvider",
    "ProdFeedbackProvider",
]
