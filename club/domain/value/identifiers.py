"""Strongly typed identifiers for club entities.

The server issues 24-character hex object ids; they are kept as strings.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
NotificationId = NewType("NotificationId", str)
AnnouncementId = NewType("AnnouncementId", str)
