"""Push event payloads.

Each named event has one payload shape. Parsing happens at the channel
boundary so a drifting server contract surfaces as a ContractError instead
of a broken store.
"""

from typing import Any, Optional

from pydantic import RootModel, ValidationError, field_validator

from club.domain.error import ContractError
from club.domain.model.common import DomainModel, ref_id
from club.domain.model.dashboard import DashboardStats
from club.domain.model.notification import Notification
from club.domain.model.post import Post
from club.domain.value import PostId, PostStatus, PushEvent


class StatusChanged(DomainModel):
    """``post:status_changed`` payload."""

    post_id: PostId
    new_status: PostStatus
    old_status: Optional[PostStatus] = None
    rejection_reason: Optional[str] = None


class ApprovalChange(DomainModel):
    """``post:approval_change`` payload: a pending post left the queue."""

    post_id: PostId
    status: Optional[PostStatus] = None


class PostRef(RootModel[str]):
    """Bare post id, as sent by the deletion events.

    Also accepts ``{"postId": ...}`` and ``{"_id": ...}``.
    """

    @field_validator("root", mode="before")
    @classmethod
    def unwrap(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return v.get("postId") or ref_id(v)
        return v


PAYLOADS: dict[PushEvent, type] = {
    PushEvent.NOTIFICATION: Notification,
    PushEvent.POST_STATUS_CHANGED: StatusChanged,
    PushEvent.POST_DELETED: PostRef,
    PushEvent.POST_DRAFT_DELETED: PostRef,
    PushEvent.POST_PENDING: Post,
    PushEvent.POST_APPROVAL_CHANGE: ApprovalChange,
    PushEvent.DASHBOARD_STATS_UPDATED: DashboardStats,
}


def parse_payload(event: PushEvent, payload: Any) -> Any:
    """Validate ``payload`` into the model registered for ``event``.

    Deletion events resolve to the plain post id string.

    Raises:
        ContractError: If the payload does not fit the event's model
    """
    model = PAYLOADS[event]
    try:
        parsed = model.model_validate(payload)
    except ValidationError as e:
        raise ContractError(event.value, str(e)) from e
    if isinstance(parsed, PostRef):
        if not parsed.root:
            raise ContractError(event.value, "empty post id")
        return PostId(parsed.root)
    return parsed
