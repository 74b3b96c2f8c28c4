"""REST API adapters."""

from club.adapter.rest.auth import RestAuthRepository
from club.adapter.rest.client import ApiClient, Envelope, Pagination
from club.adapter.rest.comment import RestCommentRepository
from club.adapter.rest.notification import RestNotificationRepository
from club.adapter.rest.post import RestPostRepository

__all__ = [
    "ApiClient",
    "Envelope",
    "Pagination",
    "RestAuthRepository",
    "RestCommentRepository",
    "RestNotificationRepository",
    "RestPostRepository",
]
