"""Post repository backed by the REST API."""

from typing import List, Optional

from club.adapter.rest.client import ApiClient
from club.domain.model.post import Post
from club.domain.repository.post import PostRepository
from club.domain.value import PostId, PostStatus


class RestPostRepository(PostRepository):
    """Posts under ``/posts``."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def list_mine(self, status: Optional[PostStatus] = None) -> List[Post]:
        params = {"status": status.value} if status is not None else None
        envelope = await self._client.fetch("GET", "/posts/user", List[Post], params=params)
        return envelope.data or []

    async def count_mine(self, status: PostStatus) -> int:
        # ``count`` is the size of the returned page; the total lives in pagination
        envelope = await self._client.fetch(
            "GET", "/posts/user", List[Post], params={"status": status.value}
        )
        if envelope.pagination is not None:
            return envelope.pagination.total
        if envelope.count is not None:
            return envelope.count
        return len(envelope.data or [])

    async def list_pending(self) -> List[Post]:
        envelope = await self._client.fetch("GET", "/posts/pending", List[Post])
        return envelope.data or []

    async def list_edit_requests(self) -> List[Post]:
        envelope = await self._client.fetch("GET", "/posts/pending-edit-requests", List[Post])
        return envelope.data or []

    async def set_status(self, post_id: PostId, status: PostStatus) -> Post:
        return await self._client.data(
            "PUT", f"/posts/{post_id}", Post, json={"status": status.value}
        )

    async def delete(self, post_id: PostId) -> None:
        await self._client.call("DELETE", f"/posts/{post_id}")

    async def approve(self, post_id: PostId) -> Post:
        return await self._client.data("PUT", f"/posts/{post_id}/approve", Post)

    async def reject(self, post_id: PostId, reason: str) -> Post:
        return await self._client.data(
            "PUT", f"/posts/{post_id}/reject", Post, json={"reason": reason}
        )

    async def approve_edit(self, post_id: PostId) -> Post:
        return await self._client.data("PUT", f"/posts/{post_id}/approve-edit", Post)

    async def reject_edit(self, post_id: PostId, reason: str) -> Post:
        return await self._client.data(
            "PUT", f"/posts/{post_id}/reject-edit", Post, json={"reason": reason}
        )

    async def toggle_like(self, post_id: PostId) -> Post:
        return await self._client.data("PUT", f"/posts/{post_id}/like", Post)
