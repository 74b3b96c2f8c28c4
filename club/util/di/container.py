"""Production container."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer, make_async_container

from club.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every production provider.

    Settings come from the environment when first resolved.
    """
    return make_async_container(*(get_provider(base)() for base in PROVIDERS))


@asynccontextmanager
async def client_scope() -> AsyncIterator[AsyncContainer]:
    """Request scope of a fresh production container.

    Closing it closes the HTTP client and the push channel.
    """
    container = create_container()
    try:
        async with container() as request:
            yield request
    finally:
        await container.close()
