"""Client-side entity projections."""

from club.domain.model.comment import Comment
from club.domain.model.dashboard import DashboardStats
from club.domain.model.event import ApprovalChange, StatusChanged, parse_payload
from club.domain.model.notification import Notification, NotificationMetadata
from club.domain.model.page import Page
from club.domain.model.post import PendingEdit, Post
from club.domain.model.user import Author, SessionUser

__all__ = [
    "Author",
    "SessionUser",
    "Comment",
    "Notification",
    "NotificationMetadata",
    "Post",
    "PendingEdit",
    "DashboardStats",
    "Page",
    "StatusChanged",
    "ApprovalChange",
    "parse_payload",
]
