"""Test container with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from club.util.di import PROVIDERS, Component, component_of, get_provider, mockable_components
from club.util.error import DependencyInjectionError


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Container where every mockable component is mocked unless unmocked.

    Args:
        unmock: Components that should use their production provider

    Raises:
        DependencyInjectionError: If ``unmock`` names an unknown component

    Examples:
        # In-memory server, test-driven channel, recorded toasts
        container = build_test_container()

        # Real socket.io client, everything else in memory
        container = build_test_container(unmock={"channel"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    providers = []
    for base in PROVIDERS:
        component = component_of(base)
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers)
