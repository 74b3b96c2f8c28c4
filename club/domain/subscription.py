"""Subscription handles for push channel listeners."""

from typing import Callable, Optional


class Subscription:
    """Handle for one registered listener.

    ``dispose()`` unregisters it. Disposing twice is a no-op, so a view
    tearing down after the session already cleared the channel is safe.
    """

    def __init__(self, event: str, release: Callable[[], None]) -> None:
        self.event = event
        self._release: Optional[Callable[[], None]] = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def dispose(self) -> None:
        release, self._release = self._release, None
        if release is not None:
            release()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()


class SubscriptionGroup:
    """Several subscriptions acquired together and disposed together."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return sum(1 for sub in self._subscriptions if sub.active)

    def add(self, subscription: Subscription) -> Subscription:
        self._subscriptions.append(subscription)
        return subscription

    def dispose(self) -> None:
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.dispose()

    def __enter__(self) -> "SubscriptionGroup":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    async def __aenter__(self) -> "SubscriptionGroup":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.dispose()
