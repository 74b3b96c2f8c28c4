"""Enumerated values shared by the club models."""

from enum import Enum


class UserRole(str, Enum):
    """Role carried by the session user."""

    USER = "USER"
    MEMBER = "MEMBER"
    ADMIN = "ADMIN"


class PostStatus(str, Enum):
    """Post workflow status.

    draft -> pending -> published | rejected. Published and rejected are
    terminal for the base post; edits to a published post travel separately
    as a pending edit.
    """

    DRAFT = "draft"
    PENDING = "pending"
    PUBLISHED = "published"
    REJECTED = "rejected"

    def can_transition_to(self, target: "PostStatus") -> bool:
        """Whether ``target`` is a legal next status."""
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[PostStatus, frozenset[PostStatus]] = {
    PostStatus.DRAFT: frozenset({PostStatus.PENDING}),
    PostStatus.PENDING: frozenset({PostStatus.PUBLISHED, PostStatus.REJECTED}),
    PostStatus.PUBLISHED: frozenset(),
    PostStatus.REJECTED: frozenset(),
}


class NotificationType(str, Enum):
    """Kinds of notification the server emits."""

    POST_APPROVED = "post_approved"
    POST_PUBLISHED = "post_published"
    POST_PENDING = "post_pending"
    POST_EDIT_REQUEST = "post_edit_request"
    POST_EDIT_APPROVED = "post_edit_approved"
    POST_EDIT_REJECTED = "post_edit_rejected"
    POST_REJECTED = "post_rejected"
    POST_LIKED = "post_liked"
    COMMENT_ADDED = "comment_added"
    COMMENT_LIKED = "comment_liked"
    COMMENT_REPLIED = "comment_replied"
    ANNOUNCEMENT_CREATED = "announcement_created"
    ROLE_CHANGED = "role_changed"
    WELCOME = "welcome"
    SYSTEM = "system"

    @property
    def targets_comment(self) -> bool:
        """Whether the notification points at a specific comment."""
        return self in (
            NotificationType.COMMENT_ADDED,
            NotificationType.COMMENT_LIKED,
            NotificationType.COMMENT_REPLIED,
        )


class PushEvent(str, Enum):
    """Named events delivered over the push channel."""

    NOTIFICATION = "notification"
    POST_STATUS_CHANGED = "post:status_changed"
    POST_DELETED = "post:deleted"
    POST_DRAFT_DELETED = "post:draft_deleted"
    POST_PENDING = "post:pending"
    POST_APPROVAL_CHANGE = "post:approval_change"
    DASHBOARD_STATS_UPDATED = "dashboard:stats_updated"


class ConnectionStatus(str, Enum):
    """Push channel connection state."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
