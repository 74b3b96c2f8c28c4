"""Push channel contract."""

from abc import ABC, abstractmethod
from typing import Any, Callable

import logfire

from club.domain.subscription import Subscription
from club.domain.value import ConnectionStatus

Listener = Callable[[Any], None]
StatusListener = Callable[[ConnectionStatus], None]


class PushChannel(ABC):
    """Process-wide server push channel.

    Keeps its own listener registry so any number of views can listen to
    the same event, and tracks the connection state machine:

        DISCONNECTED -> CONNECTING -> CONNECTED -> DISCONNECTED

    Events that arrive while not CONNECTED are dropped; there is no replay.
    Transports implement ``_open`` and ``_close`` and feed incoming events
    to ``_dispatch``.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._handles: list[Subscription] = []
        self._status_listeners: list[StatusListener] = []
        self._status = ConnectionStatus.DISCONNECTED
        self._token: str | None = None

    @property
    def status(self) -> ConnectionStatus:
        return self._status

    @property
    def is_connected(self) -> bool:
        return self._status == ConnectionStatus.CONNECTED

    def on(self, event: str, listener: Listener) -> Subscription:
        """Register ``listener`` for ``event``.

        Returns:
            Handle whose ``dispose()`` removes exactly this registration
        """
        self._listeners.setdefault(event, []).append(listener)
        self._ensure_forwarder(event)

        def release() -> None:
            listeners = self._listeners.get(event, [])
            if listener in listeners:
                listeners.remove(listener)
            self._handles = [handle for handle in self._handles if handle.active]

        subscription = Subscription(event, release)
        self._handles.append(subscription)
        return subscription

    def on_status(self, listener: StatusListener) -> Subscription:
        self._status_listeners.append(listener)

        def release() -> None:
            if listener in self._status_listeners:
                self._status_listeners.remove(listener)

        return Subscription("status", release)

    def listener_count(self, event: str | None = None) -> int:
        if event is not None:
            return len(self._listeners.get(event, []))
        return sum(len(listeners) for listeners in self._listeners.values())

    def clear(self) -> None:
        """Drop every event listener; handles already given out become inactive."""
        handles, self._handles = self._handles, []
        for handle in handles:
            handle.dispose()
        self._listeners.clear()

    async def connect(self, token: str) -> None:
        """Open the channel with the session token.

        Connecting again with the same token is a no-op. A different token
        closes the current connection first, so the socket always speaks
        for the latest session.

        Raises:
            ChannelError: If the transport refuses or times out
        """
        if self._status != ConnectionStatus.DISCONNECTED:
            if token == self._token:
                return
            logfire.info("Push channel token changed, reconnecting")
            await self.disconnect()

        self._set_status(ConnectionStatus.CONNECTING)
        try:
            await self._open(token)
        except BaseException:
            self._set_status(ConnectionStatus.DISCONNECTED)
            raise
        self._token = token
        self._set_status(ConnectionStatus.CONNECTED)

    async def disconnect(self) -> None:
        if self._status == ConnectionStatus.DISCONNECTED:
            return
        self._token = None
        self._set_status(ConnectionStatus.DISCONNECTED)
        await self._close()

    def _dispatch(self, event: str, payload: Any) -> None:
        if self._status != ConnectionStatus.CONNECTED:
            logfire.debug("Dropped push event while not connected", push_event=event)
            return
        for listener in list(self._listeners.get(event, [])):
            try:
                listener(payload)
            except Exception:
                logfire.error("Push listener failed", push_event=event, _exc_info=True)

    def _connection_lost(self) -> None:
        """Transports call this when the server side closes the connection."""
        if self._status == ConnectionStatus.DISCONNECTED:
            return
        logfire.warn("Push channel connection lost", previous=self._status.value)
        self._token = None
        self._set_status(ConnectionStatus.DISCONNECTED)

    def _set_status(self, status: ConnectionStatus) -> None:
        if status == self._status:
            return
        previous, self._status = self._status, status
        logfire.info(
            "Push channel status changed",
            previous=previous.value,
            status=status.value,
        )
        for listener in list(self._status_listeners):
            listener(status)

    def _ensure_forwarder(self, event: str) -> None:
        """Hook for transports that must register per-event handlers."""
        pass

    @abstractmethod
    async def _open(self, token: str) -> None:
        pass

    @abstractmethod
    async def _close(self) -> None:
        pass
