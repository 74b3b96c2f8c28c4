"""Post status view.

The client only mirrors the parts of a post that change under moderation:
status, likes, rejection reason and a pending edit.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from club.domain.error import InvalidTransitionError
from club.domain.model.common import DomainModel, id_field, ref_id
from club.domain.model.user import Author
from club.domain.value import PostId, PostStatus, UserId


class PendingEdit(DomainModel):
    """Member-submitted edit to a published post, awaiting an admin."""

    title: Optional[str] = None
    content: Optional[str] = None
    featured_image: Optional[str] = None
    submitted_at: Optional[datetime] = None
    submitted_by: Optional[UserId] = None

    @field_validator("submitted_by", mode="before")
    @classmethod
    def collapse_reference(cls, v: Any) -> Any:
        return ref_id(v)


class Post(DomainModel):
    """Post projection used by every post list.

    Exactly one status at a time. ``rejection_reason`` is kept only while
    the post is rejected.
    """

    id: PostId = id_field()
    status: PostStatus = PostStatus.DRAFT
    title: str = ""
    author: Optional[Author] = None
    likes: list[UserId] = Field(default_factory=list)
    rejection_reason: Optional[str] = None
    pending_edit: Optional[PendingEdit] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("likes", mode="before")
    @classmethod
    def collapse_likes(cls, v: Any) -> Any:
        if v is None:
            return []
        return [ref_id(liker) for liker in v]

    @field_validator("pending_edit", mode="before")
    @classmethod
    def empty_edit_is_none(cls, v: Any) -> Any:
        # Mongo serializes an unset sub-document as {}
        if isinstance(v, dict) and not any(v.values()):
            return None
        return v

    @model_validator(mode="after")
    def reason_only_when_rejected(self) -> "Post":
        if self.status != PostStatus.REJECTED and self.rejection_reason is not None:
            object.__setattr__(self, "rejection_reason", None)
        return self

    @property
    def has_pending_edit(self) -> bool:
        return self.pending_edit is not None

    def status_fields(
        self, target: PostStatus, rejection_reason: Optional[str] = None
    ) -> dict[str, Any]:
        """Fields to patch for a move to ``target``.

        Raises:
            InvalidTransitionError: If ``target`` is not reachable from the
                current status
        """
        if not self.status.can_transition_to(target):
            raise InvalidTransitionError(self.id, self.status.value, target.value)
        return {
            "status": target,
            "rejection_reason": rejection_reason if target == PostStatus.REJECTED else None,
        }
