"""Domain value objects for the club client."""

from club.domain.value.identifiers import (
    AnnouncementId,
    CommentId,
    NotificationId,
    PostId,
    UserId,
)
from club.domain.value.types import (
    ConnectionStatus,
    NotificationType,
    PostStatus,
    PushEvent,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "NotificationId",
    "AnnouncementId",
    # Types
    "UserRole",
    "PostStatus",
    "NotificationType",
    "PushEvent",
    "ConnectionStatus",
]
