"""Domain services."""

from club.domain.service.acknowledger import (
    Acknowledgement,
    Acknowledger,
    LogfireAcknowledger,
    RecordingAcknowledger,
)
from club.domain.service.channel import PushChannel

__all__ = [
    "Acknowledgement",
    "Acknowledger",
    "LogfireAcknowledger",
    "RecordingAcknowledger",
    "PushChannel",
]
