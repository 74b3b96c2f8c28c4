"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from club.domain.model.comment import Comment
from club.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Server-side comments for a post.

    Implementations talk to the REST API; the in-memory one stands in for
    the server in tests.
    """

    @abstractmethod
    async def list_for_post(self, post_id: PostId) -> List[Comment]:
        """Top-level comments of a post, newest first, replies populated."""
        pass

    @abstractmethod
    async def create(
        self, post_id: PostId, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        """Create a comment, or a reply when ``parent_id`` is given.

        Returns:
            The created comment with its server-assigned id
        """
        pass

    @abstractmethod
    async def update(self, comment_id: CommentId, content: str) -> Comment:
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        pass

    @abstractmethod
    async def toggle_like(self, comment_id: CommentId) -> Comment:
        """Like the comment, or unlike it if the session user already does."""
        pass

    @abstractmethod
    async def update_reply(
        self, parent_id: CommentId, reply_id: CommentId, content: str
    ) -> Comment:
        pass

    @abstractmethod
    async def delete_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        pass

    @abstractmethod
    async def toggle_reply_like(
        self, parent_id: CommentId, reply_id: CommentId
    ) -> Comment:
        pass
