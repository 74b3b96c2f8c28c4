"""In-memory push channel for testing."""

from typing import Any, Optional

from club.adapter.error import ChannelError
from club.domain.service.channel import PushChannel


class InMemoryPushChannel(PushChannel):
    """Push channel driven by the test itself.

    ``emit`` plays the server side: the event goes through the same dispatch
    path as one arriving over a socket, so it is dropped unless connected.
    """

    def __init__(self) -> None:
        super().__init__()
        self.tokens: list[str] = []
        self._connect_error: Optional[ChannelError] = None

    def refuse_next_connect(self, error: Optional[ChannelError] = None) -> None:
        self._connect_error = error or ChannelError("Connection refused")

    def emit(self, event: str, payload: Any) -> None:
        self._dispatch(event, payload)

    def drop(self) -> None:
        """Simulate the server closing the connection."""
        self._connection_lost()

    async def _open(self, token: str) -> None:
        error, self._connect_error = self._connect_error, None
        if error is not None:
            raise error
        self.tokens.append(token)

    async def _close(self) -> None:
        pass
