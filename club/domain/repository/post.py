"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from club.domain.model.post import Post
from club.domain.value import PostId, PostStatus


class PostRepository(ABC):
    """Post moderation endpoints.

    Member lists are scoped to the session user; the pending and edit
    request queues are admin-only on the server.
    """

    @abstractmethod
    async def list_mine(self, status: Optional[PostStatus] = None) -> List[Post]:
        """Session user's posts, optionally filtered by status."""
        pass

    @abstractmethod
    async def count_mine(self, status: PostStatus) -> int:
        pass

    @abstractmethod
    async def list_pending(self) -> List[Post]:
        pass

    @abstractmethod
    async def list_edit_requests(self) -> List[Post]:
        """Published posts carrying a pending edit."""
        pass

    @abstractmethod
    async def set_status(self, post_id: PostId, status: PostStatus) -> Post:
        """Member-side status change (submitting a draft for review)."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        pass

    @abstractmethod
    async def approve(self, post_id: PostId) -> Post:
        pass

    @abstractmethod
    async def reject(self, post_id: PostId, reason: str) -> Post:
        pass

    @abstractmethod
    async def approve_edit(self, post_id: PostId) -> Post:
        pass

    @abstractmethod
    async def reject_edit(self, post_id: PostId, reason: str) -> Post:
        pass

    @abstractmethod
    async def toggle_like(self, post_id: PostId) -> Post:
        pass
