"""Repository interfaces for server-owned collections."""

from club.domain.repository.auth import AuthRepository, CredentialStore
from club.domain.repository.comment import CommentRepository
from club.domain.repository.notification import NotificationRepository
from club.domain.repository.post import PostRepository

__all__ = [
    "AuthRepository",
    "CredentialStore",
    "CommentRepository",
    "NotificationRepository",
    "PostRepository",
]
