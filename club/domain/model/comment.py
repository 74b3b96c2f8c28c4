"""Comment projection.

Comments nest exactly one level: a top-level comment carries its replies,
a reply never carries any.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator, model_validator

from club.domain.model.common import DomainModel, id_field, ref_id
from club.domain.model.user import Author
from club.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post, or a reply to a top-level comment.

    ``replies`` is populated only on top-level comments. Anything the server
    nests deeper, and reply ids it left unpopulated, are dropped during
    parsing so the two-level shape holds for every stored comment.
    """

    id: CommentId = id_field()
    content: str
    author: Author
    post_id: Optional[PostId] = Field(
        default=None, validation_alias=AliasChoices("post", "postId", "post_id")
    )
    parent_id: Optional[CommentId] = Field(
        default=None,
        validation_alias=AliasChoices(
            "parentComment", "parentCommentId", "parentId", "parent_id"
        ),
    )
    likes: list[UserId] = Field(default_factory=list)
    is_edited: bool = False
    created_at: Optional[datetime] = None
    replies: list["Comment"] = Field(default_factory=list)

    @field_validator("post_id", "parent_id", mode="before")
    @classmethod
    def collapse_reference(cls, v: Any) -> Any:
        return ref_id(v)

    @field_validator("likes", mode="before")
    @classmethod
    def collapse_likes(cls, v: Any) -> Any:
        if v is None:
            return []
        return [ref_id(liker) for liker in v]

    @field_validator("replies", mode="before")
    @classmethod
    def drop_unpopulated_replies(cls, v: Any) -> Any:
        if v is None:
            return []
        return [reply for reply in v if not isinstance(reply, str)]

    @model_validator(mode="after")
    def enforce_two_levels(self) -> "Comment":
        """Replies never carry replies; top-level replies are flattened."""
        if self.parent_id is not None and self.replies:
            object.__setattr__(self, "replies", [])
        elif any(reply.replies for reply in self.replies):
            object.__setattr__(
                self,
                "replies",
                [reply.model_copy(update={"replies": []}) for reply in self.replies],
            )
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    def find_reply(self, reply_id: CommentId) -> Optional["Comment"]:
        return next((reply for reply in self.replies if reply.id == reply_id), None)
