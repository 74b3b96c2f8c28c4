"""socket.io push channel."""

from typing import Any, Optional

import logfire
import socketio
from socketio.exceptions import ConnectionError as SocketConnectionError

from club.adapter.error import ChannelError
from club.config import ChannelSettings
from club.domain.service.channel import PushChannel


class SocketIOPushChannel(PushChannel):
    """Push channel over a python-socketio client.

    socket.io keeps one handler per event, so the channel registers a single
    forwarder the first time an event gets a listener and fans out through
    its own registry. The token travels in the handshake ``auth`` payload.
    """

    def __init__(
        self, settings: ChannelSettings, client: Optional[socketio.AsyncClient] = None
    ) -> None:
        super().__init__()
        self._settings = settings
        self._sio = client or socketio.AsyncClient(
            reconnection=settings.reconnection,
            logger=False,
            engineio_logger=False,
        )
        self._forwarded: set[str] = set()
        self._sio.on("disconnect", self._on_disconnect)

    def _ensure_forwarder(self, event: str) -> None:
        if event in self._forwarded:
            return
        self._forwarded.add(event)

        async def forward(*args: Any) -> None:
            self._dispatch(event, args[0] if args else None)

        self._sio.on(event, forward)

    async def _open(self, token: str) -> None:
        try:
            await self._sio.connect(
                self._settings.url,
                auth={"token": token},
                transports=self._settings.transports,
                socketio_path=self._settings.socketio_path,
                wait_timeout=self._settings.wait_timeout,
            )
        except SocketConnectionError as e:
            logfire.error(
                "Push channel connection failed", url=self._settings.url, error=str(e)
            )
            raise ChannelError(str(e)) from e
        logfire.info("Push channel connected", url=self._settings.url, sid=self._sio.sid)

    async def _close(self) -> None:
        await self._sio.disconnect()

    async def _on_disconnect(self, *args: Any) -> None:
        self._connection_lost()
