"""In-memory adapters standing in for the API server and push channel."""

from club.adapter.memory.auth import InMemoryAuthRepository
from club.adapter.memory.backend import InMemoryBackend
from club.adapter.memory.channel import InMemoryPushChannel
from club.adapter.memory.comment import InMemoryCommentRepository
from club.adapter.memory.notification import InMemoryNotificationRepository
from club.adapter.memory.post import InMemoryPostRepository

__all__ = [
    "InMemoryAuthRepository",
    "InMemoryBackend",
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryPushChannel",
]
