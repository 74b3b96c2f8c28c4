"""In-memory comment repository for testing."""

from typing import List, Optional

from club.adapter.error import ApiError
from club.adapter.memory.backend import InMemoryBackend
from club.domain.model.comment import Comment
from club.domain.model.common import toggle_like
from club.domain.repository.comment import CommentRepository
from club.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Top-level comments are kept newest first, each carrying its replies.
    """

    def __init__(self, backend: InMemoryBackend) -> None:
        self._backend = backend

    async def list_for_post(self, post_id: PostId) -> List[Comment]:
        self._backend.record("comments.list")
        return [c for c in self._backend.comments if c.post_id == post_id]

    async def create(
        self, post_id: PostId, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        self._backend.record("comments.create")
        if not content.strip():
            raise ApiError("POST", "/comments", 400, "Content cannot be empty")

        comment = Comment(
            id=CommentId(self._backend.next_id("c")),
            content=content.strip(),
            author=self._backend.current_author(),
            post_id=post_id,
            parent_id=parent_id,
            created_at=self._backend.now(),
        )
        if parent_id is None:
            self._backend.comments.insert(0, comment)
            return comment

        index = self._index(parent_id)
        parent = self._backend.comments[index]
        self._backend.comments[index] = parent.model_copy(
            update={"replies": [*parent.replies, comment]}
        )
        return comment

    async def update(self, comment_id: CommentId, content: str) -> Comment:
        self._backend.record("comments.update")
        index = self._index(comment_id)
        comment = self._backend.comments[index]
        self._check_author(comment)
        updated = comment.model_copy(update={"content": content, "is_edited": True})
        self._backend.comments[index] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> None:
        self._backend.record("comments.delete")
        index = self._index(comment_id)
        self._check_author(self._backend.comments[index])
        del self._backend.comments[index]

    async def toggle_like(self, comment_id: CommentId) -> Comment:
        self._backend.record("comments.like")
        user = self._backend.current_user()
        index = self._index(comment_id)
        comment = self._backend.comments[index]
        updated = comment.model_copy(update={"likes": toggle_like(comment.likes, user.id)})
        self._backend.comments[index] = updated
        return updated

    async def update_reply(
        self, parent_id: CommentId, reply_id: CommentId, content: str
    ) -> Comment:
        self._backend.record("comments.update_reply")
        reply = self._reply(parent_id, reply_id)
        self._check_author(reply)
        updated = reply.model_copy(update={"content": content, "is_edited": True})
        self._replace_reply(parent_id, updated)
        return updated

    async def delete_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        self._backend.record("comments.delete_reply")
        self._check_author(self._reply(parent_id, reply_id))
        index = self._index(parent_id)
        parent = self._backend.comments[index]
        self._backend.comments[index] = parent.model_copy(
            update={"replies": [r for r in parent.replies if r.id != reply_id]}
        )

    async def toggle_reply_like(
        self, parent_id: CommentId, reply_id: CommentId
    ) -> Comment:
        self._backend.record("comments.like_reply")
        user = self._backend.current_user()
        reply = self._reply(parent_id, reply_id)
        updated = reply.model_copy(update={"likes": toggle_like(reply.likes, user.id)})
        self._replace_reply(parent_id, updated)
        return updated

    def _index(self, comment_id: CommentId) -> int:
        for i, comment in enumerate(self._backend.comments):
            if comment.id == comment_id:
                return i
        raise ApiError("GET", f"/comments/{comment_id}", 404, "Comment not found")

    def _reply(self, parent_id: CommentId, reply_id: CommentId) -> Comment:
        parent = self._backend.comments[self._index(parent_id)]
        reply = parent.find_reply(reply_id)
        if reply is None:
            raise ApiError("GET", f"/comments/{parent_id}/replies/{reply_id}", 404, "Reply not found")
        return reply

    def _replace_reply(self, parent_id: CommentId, reply: Comment) -> None:
        index = self._index(parent_id)
        parent = self._backend.comments[index]
        self._backend.comments[index] = parent.model_copy(
            update={"replies": [reply if r.id == reply.id else r for r in parent.replies]}
        )

    def _check_author(self, comment: Comment) -> None:
        user = self._backend.current_user()
        if comment.author.id != user.id and not user.is_admin:
            raise ApiError(
                "PUT", f"/comments/{comment.id}", 403, "You are not allowed to edit this comment"
            )
