"""Push channel infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from club.adapter.socket import SocketIOPushChannel
from club.config import ChannelSettings
from club.domain.service.channel import PushChannel
from club.util.di.base import ProviderBase


class ChannelProvider(ProviderBase):
    """Push channel component base."""

    __mock_component__ = "channel"


class ProdChannelProvider(ChannelProvider):
    """Production push channel over socket.io."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_push_channel(self, settings: ChannelSettings) -> AsyncIterator[PushChannel]:
        """Provide the process-wide channel; it is closed with the container."""
        channel = SocketIOPushChannel(settings)
        yield channel
        await channel.disconnect()
