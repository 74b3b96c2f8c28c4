"""Optimistic mutations with rollback-via-reload."""

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar

import logfire

from club.adapter.error import AdapterError, ApiError
from club.domain.error import DomainError
from club.domain.service.acknowledger import Acknowledger

T = TypeVar("T")

# Failures the mutator absorbs. Anything else is a bug and propagates.
MUTATION_ERRORS = (AdapterError, DomainError)


@dataclass
class MutationResult(Generic[T]):
    """Outcome of one mutation.

    ``data`` is the server's answer when the request succeeded.
    """

    ok: bool
    data: Optional[T] = None
    error: Optional[Exception] = None


def failure_message(error: Exception, fallback: str) -> str:
    """The server's own message when it sent one, else ``fallback``."""
    if isinstance(error, ApiError) and error.message:
        return error.message
    return fallback


class OptimisticMutator:
    """Runs user actions against the server.

    ``run`` applies the local effect synchronously, then awaits the request.
    On failure it reloads the whole collection from the server and emits
    exactly one error acknowledgement. Failures never leave the mutator.
    """

    def __init__(self, acknowledger: Acknowledger) -> None:
        self.acknowledger = acknowledger
        self._unauthorized_handlers: list[Callable[[], Awaitable[None]]] = []

    def on_unauthorized(self, handler: Callable[[], Awaitable[None]]) -> None:
        """Call ``handler`` whenever a request is refused with 401."""
        self._unauthorized_handlers.append(handler)

    async def run(
        self,
        action: str,
        *,
        effect: Callable[[], None],
        request: Callable[[], Awaitable[T]],
        rollback: Callable[[], Awaitable[None]],
        failure: str,
        success: Optional[str] = None,
    ) -> MutationResult[T]:
        """Apply ``effect`` now, then confirm it with ``request``.

        Args:
            action: Name used in logs
            effect: Synchronous store update standing in for the outcome
            request: The network call
            rollback: Full fetch of the affected collection
            failure: Fallback error text
            success: Optional success text

        Returns:
            Result with the server's answer, or the error that was absorbed
        """
        effect()
        with logfire.span("mutation.{action}", action=action):
            try:
                data = await request()
            except MUTATION_ERRORS as e:
                await self._rollback(action, rollback)
                await self._fail(action, e, failure)
                return MutationResult(ok=False, error=e)

        if success:
            self.acknowledger.success(success)
        return MutationResult(ok=True, data=data)

    async def confirm(
        self,
        action: str,
        *,
        request: Callable[[], Awaitable[T]],
        apply: Callable[[T], None],
        failure: str,
        success: Optional[str] = None,
    ) -> MutationResult[T]:
        """Await ``request`` and only then apply its answer locally.

        For actions whose outcome needs server-assigned data, such as the id
        of a new comment. Nothing local changes on failure.
        """
        with logfire.span("mutation.{action}", action=action):
            try:
                data = await request()
            except MUTATION_ERRORS as e:
                await self._fail(action, e, failure)
                return MutationResult(ok=False, error=e)

        apply(data)
        if success:
            self.acknowledger.success(success)
        return MutationResult(ok=True, data=data)

    def reject(self, action: str, message: str, error: Optional[Exception] = None) -> MutationResult:
        """Refuse an action before any local effect or request."""
        logfire.info("Mutation rejected locally", action=action, reason=message)
        self.acknowledger.error(message)
        return MutationResult(ok=False, error=error)

    async def _rollback(self, action: str, rollback: Callable[[], Awaitable[None]]) -> None:
        try:
            await rollback()
        except MUTATION_ERRORS as e:
            logfire.error("Rollback fetch failed", action=action, error=str(e))

    async def _fail(self, action: str, error: Exception, fallback: str) -> None:
        logfire.warn("Mutation failed", action=action, error=str(error))
        self.acknowledger.error(failure_message(error, fallback))
        if isinstance(error, ApiError) and error.is_unauthorized:
            for handler in list(self._unauthorized_handlers):
                await handler()
