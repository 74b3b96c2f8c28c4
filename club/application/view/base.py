"""Base class for synchronized collections."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

import logfire

from club.application.listener import RealtimeListener
from club.application.mutator import MUTATION_ERRORS, MutationResult, OptimisticMutator
from club.application.session import Session
from club.domain.error import NotAuthenticatedError, NotAuthorizedError
from club.domain.subscription import SubscriptionGroup
from club.domain.value import PushEvent


class View(ABC):
    """One server collection mirrored into a local store.

    The view owns its store exclusively. ``fetch`` installs server truth,
    ``bind`` subscribes the view's push handlers and ``close`` disposes them.
    Used as an async context manager it fetches and binds on enter and
    always disposes on exit.
    """

    # Error text when the initial fetch fails
    fetch_failure = "Failed to fetch data"

    def __init__(
        self, mutator: OptimisticMutator, listener: RealtimeListener, session: Session
    ) -> None:
        self._mutator = mutator
        self._listener = listener
        self._session = session
        self._subscriptions = SubscriptionGroup()
        self.loading = False

    @property
    def subscriptions(self) -> int:
        """Number of live push subscriptions held by this view."""
        return len(self._subscriptions)

    @abstractmethod
    async def _reload(self) -> None:
        """Fetch the collection and ``replace_all``. Errors propagate."""
        pass

    def _bind(self) -> None:
        """Register push handlers through ``_listen``."""
        pass

    async def fetch(self) -> bool:
        """Reload from the server; on failure keep the current snapshot.

        Returns:
            True if the store now holds server truth
        """
        self.loading = True
        try:
            with logfire.span("view.fetch", view=type(self).__name__):
                await self._reload()
            return True
        except MUTATION_ERRORS as e:
            logfire.error("Fetch failed", view=type(self).__name__, error=str(e))
            self._mutator.acknowledger.error(self.fetch_failure)
            return False
        finally:
            self.loading = False

    def bind(self) -> None:
        """Subscribe push handlers, replacing any earlier registration."""
        self._subscriptions.dispose()
        self._bind()

    def close(self) -> None:
        self._subscriptions.dispose()

    def _listen(self, event: PushEvent, apply: Callable[[Any], None]) -> None:
        self._subscriptions.add(self._listener.listen(event, apply))

    def _require_login(self, action: str, message: str) -> Optional[MutationResult]:
        """Rejected result if nobody is logged in, else None."""
        if self._session.is_authenticated:
            return None
        return self._mutator.reject(action, message, NotAuthenticatedError(action))

    def _require_admin(self, action: str) -> Optional[MutationResult]:
        if self._session.is_admin:
            return None
        return self._mutator.reject(
            action,
            "Admin access required",
            NotAuthorizedError(action, "ADMIN"),
        )

    async def __aenter__(self) -> "View":
        await self.fetch()
        self.bind()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()
