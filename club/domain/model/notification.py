"""Notification projection."""

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from club.domain.model.common import DomainModel, id_field, ref_id
from club.domain.model.user import Author
from club.domain.value import (
    AnnouncementId,
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
)


class NotificationMetadata(DomainModel):
    """Pointers from a notification to the entity it is about."""

    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    parent_comment_id: Optional[CommentId] = None
    announcement_id: Optional[AnnouncementId] = None
    rejection_reason: Optional[str] = None
    new_role: Optional[str] = None

    @field_validator(
        "post_id", "comment_id", "parent_comment_id", "announcement_id", mode="before"
    )
    @classmethod
    def collapse_reference(cls, v: Any) -> Any:
        return ref_id(v)


class Notification(DomainModel):
    """Notification delivered to the session user.

    ``is_read`` only ever moves from False to True; the notification store
    refuses the reverse.
    """

    id: NotificationId = id_field()
    type: NotificationType
    title: str
    message: str
    is_read: bool = False
    metadata: Optional[NotificationMetadata] = None
    sender: Optional[Author] = None
    read_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @property
    def post_id(self) -> Optional[PostId]:
        return self.metadata.post_id if self.metadata else None

    @property
    def comment_id(self) -> Optional[CommentId]:
        return self.metadata.comment_id if self.metadata else None
