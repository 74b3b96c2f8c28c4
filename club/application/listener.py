"""Push event listener."""

from typing import Any, Callable

import logfire

from club.domain.error import ContractError
from club.domain.model.event import parse_payload
from club.domain.service.channel import PushChannel
from club.domain.subscription import Subscription
from club.domain.value import PushEvent


class RealtimeListener:
    """Translates named push events into typed store updates.

    Payloads are validated before ``apply`` sees them; a malformed payload
    is logged and dropped without touching any store.
    """

    def __init__(self, channel: PushChannel) -> None:
        self.channel = channel

    def listen(self, event: PushEvent, apply: Callable[[Any], None]) -> Subscription:
        def handle(payload: Any) -> None:
            try:
                parsed = parse_payload(event, payload)
            except ContractError as e:
                logfire.warn("Dropped malformed push payload", push_event=event.value, error=str(e))
                return
            apply(parsed)

        return self.channel.on(event.value, handle)
