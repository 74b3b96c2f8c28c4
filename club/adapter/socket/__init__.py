"""socket.io adapter."""

from club.adapter.socket.channel import SocketIOPushChannel

__all__ = ["SocketIOPushChannel"]
