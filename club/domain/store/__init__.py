"""Local reducer stores."""

from club.domain.store.base import EntityStore
from club.domain.store.comment import CommentStore
from club.domain.store.notification import NotificationStore

__all__ = ["EntityStore", "CommentStore", "NotificationStore"]
