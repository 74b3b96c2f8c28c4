"""Comment thread of one post."""

from club.application.listener import RealtimeListener
from club.application.mutator import MutationResult, OptimisticMutator
from club.application.session import Session
from club.application.view.base import View
from club.domain.error import ValidationError
from club.domain.model.comment import Comment
from club.domain.model.common import toggle_like
from club.domain.repository.comment import CommentRepository
from club.domain.store import CommentStore
from club.domain.value import CommentId, PostId


class CommentThread(View):
    """Top-level comments of a post with their replies, newest first.

    New comments and replies wait for the server, since they need its id.
    Edits, deletions and likes are optimistic.
    """

    fetch_failure = "Failed to fetch comments"

    def __init__(
        self,
        post_id: PostId,
        comments: CommentRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> None:
        super().__init__(mutator, listener, session)
        self.post_id = post_id
        self.store = CommentStore()
        self._comments = comments

    @property
    def comments(self) -> list[Comment]:
        return self.store.snapshot()

    async def _reload(self) -> None:
        self.store.replace_all(await self._comments.list_for_post(self.post_id))

    async def add_comment(self, content: str) -> MutationResult:
        rejected = self._require_login("add_comment", "Please login to comment")
        if rejected is not None:
            return rejected
        if not content.strip():
            return self._mutator.reject(
                "add_comment", "Comment cannot be empty", ValidationError("empty comment")
            )

        return await self._mutator.confirm(
            "add_comment",
            request=lambda: self._comments.create(self.post_id, content),
            apply=self.store.insert_front,
            failure="Failed to add comment",
            success="Comment added successfully",
        )

    async def edit_comment(self, comment_id: CommentId, content: str) -> MutationResult:
        if not content.strip():
            return self._mutator.reject(
                "edit_comment", "Comment cannot be empty", ValidationError("empty comment")
            )

        return await self._mutator.run(
            "edit_comment",
            effect=lambda: self.store.patch(comment_id, content=content, is_edited=True),
            request=lambda: self._comments.update(comment_id, content),
            rollback=self._reload,
            failure="Failed to update comment",
            success="Comment updated successfully",
        )

    async def delete_comment(self, comment_id: CommentId) -> MutationResult:
        return await self._mutator.run(
            "delete_comment",
            effect=lambda: self.store.remove(comment_id),
            request=lambda: self._comments.delete(comment_id),
            rollback=self._reload,
            failure="Failed to delete comment",
            success="Comment deleted successfully",
        )

    async def like_comment(self, comment_id: CommentId) -> MutationResult:
        rejected = self._require_login("like_comment", "Please login to like comments")
        if rejected is not None:
            return rejected
        user_id = self._session.user_id

        return await self._mutator.run(
            "like_comment",
            effect=lambda: self.store.update(
                comment_id, lambda c: {"likes": toggle_like(c.likes, user_id)}
            ),
            request=lambda: self._comments.toggle_like(comment_id),
            rollback=self._reload,
            failure="Failed to like comment",
        )

    async def reply(self, parent_id: CommentId, content: str) -> MutationResult:
        rejected = self._require_login("reply", "Please login to comment")
        if rejected is not None:
            return rejected
        if not content.strip():
            return self._mutator.reject(
                "reply", "Reply cannot be empty", ValidationError("empty reply")
            )

        return await self._mutator.confirm(
            "reply",
            request=lambda: self._comments.create(self.post_id, content, parent_id),
            apply=lambda reply: self.store.append_nested(parent_id, reply),
            failure="Failed to add reply",
            success="Reply added successfully",
        )

    async def edit_reply(
        self, parent_id: CommentId, reply_id: CommentId, content: str
    ) -> MutationResult:
        if not content.strip():
            return self._mutator.reject(
                "edit_reply", "Reply cannot be empty", ValidationError("empty reply")
            )

        return await self._mutator.run(
            "edit_reply",
            effect=lambda: self.store.map_nested(
                parent_id, reply_id, content=content, is_edited=True
            ),
            request=lambda: self._comments.update_reply(parent_id, reply_id, content),
            rollback=self._reload,
            failure="Failed to update reply",
        )

    async def delete_reply(self, parent_id: CommentId, reply_id: CommentId) -> MutationResult:
        return await self._mutator.run(
            "delete_reply",
            effect=lambda: self.store.remove_nested(parent_id, reply_id),
            request=lambda: self._comments.delete_reply(parent_id, reply_id),
            rollback=self._reload,
            failure="Failed to delete reply",
            success="Reply deleted successfully",
        )

    async def like_reply(self, parent_id: CommentId, reply_id: CommentId) -> MutationResult:
        rejected = self._require_login("like_reply", "Please login to like comments")
        if rejected is not None:
            return rejected
        user_id = self._session.user_id

        return await self._mutator.run(
            "like_reply",
            effect=lambda: self.store.update_nested(
                parent_id, reply_id, lambda r: {"likes": toggle_like(r.likes, user_id)}
            ),
            request=lambda: self._comments.toggle_reply_like(parent_id, reply_id),
            rollback=self._reload,
            failure="Failed to like reply",
        )


class CommentThreadFactory:
    """Builds a CommentThread for a given post."""

    def __init__(
        self,
        comments: CommentRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> None:
        self._comments = comments
        self._mutator = mutator
        self._listener = listener
        self._session = session

    def create(self, post_id: PostId) -> CommentThread:
        return CommentThread(
            post_id, self._comments, self._mutator, self._listener, self._session
        )
