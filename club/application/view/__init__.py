"""Synchronized collections consumed by the UI."""

from club.application.view.base import View
from club.application.view.comments import CommentThread, CommentThreadFactory
from club.application.view.dashboard import Dashboard
from club.application.view.notifications import NotificationFeed, NotificationFeedFactory
from club.application.view.posts import (
    DraftPosts,
    EditRequests,
    MyPosts,
    PendingPosts,
    PostListView,
)

__all__ = [
    "View",
    "CommentThread",
    "CommentThreadFactory",
    "Dashboard",
    "NotificationFeed",
    "NotificationFeedFactory",
    "DraftPosts",
    "EditRequests",
    "MyPosts",
    "PendingPosts",
    "PostListView",
]
