"""Comment store with reply-level operations."""

from typing import Any, Callable

from club.domain.model.comment import Comment
from club.domain.store.base import EntityStore
from club.domain.value import CommentId


class CommentStore(EntityStore[Comment]):
    """Top-level comments, each carrying its replies.

    Reply operations touch only the addressed reply; siblings and the
    parent's own fields are carried over unchanged.
    """

    def map_nested(self, parent_id: CommentId, child_id: CommentId, **fields: Any) -> None:
        """Patch reply ``child_id`` of ``parent_id``; no-op if either is absent."""
        self.update_nested(parent_id, child_id, lambda _: fields)

    def update_nested(
        self,
        parent_id: CommentId,
        child_id: CommentId,
        change: Callable[[Comment], dict[str, Any]],
    ) -> None:
        parent = self.get(parent_id)
        if parent is None or parent.find_reply(child_id) is None:
            return
        replies = [
            reply.model_copy(update=change(reply)) if reply.id == child_id else reply
            for reply in parent.replies
        ]
        self.patch(parent_id, replies=replies)

    def append_nested(self, parent_id: CommentId, child: Comment) -> None:
        """Add ``child`` as the newest reply of ``parent_id``."""
        parent = self.get(parent_id)
        if parent is None:
            return
        if parent.find_reply(child.id) is not None:
            self.map_nested(parent_id, child.id, content=child.content, likes=child.likes)
            return
        reply = child.model_copy(update={"parent_id": parent_id, "replies": []})
        self.patch(parent_id, replies=[*parent.replies, reply])

    def remove_nested(self, parent_id: CommentId, child_id: CommentId) -> None:
        parent = self.get(parent_id)
        if parent is None:
            return
        self.patch(
            parent_id,
            replies=[reply for reply in parent.replies if reply.id != child_id],
        )

    def count(self) -> int:
        """Comments plus replies."""
        return sum(1 + len(comment.replies) for comment in self._items)
