"""Comment repository backed by the REST API."""

from typing import List, Optional

from club.adapter.rest.client import ApiClient
from club.domain.model.comment import Comment
from club.domain.repository.comment import CommentRepository
from club.domain.value import CommentId, PostId


class RestCommentRepository(CommentRepository):
    """Comments under ``/comments``."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def list_for_post(self, post_id: PostId) -> List[Comment]:
        return await self._client.data("GET", f"/comments/post/{post_id}", List[Comment])

    async def create(
        self, post_id: PostId, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        body = {"content": content, "postId": post_id}
        if parent_id is not None:
            body["parentCommentId"] = parent_id
        return await self._client.data("POST", "/comments", Comment, json=body)

    async def update(self, comment_id: CommentId, content: str) -> Comment:
        return await self._client.data(
            "PUT", f"/comments/{comment_id}", Comment, json={"content": content}
        )

    async def delete(self, comment_id: CommentId) -> None:
        await self._client.call("DELETE", f"/comments/{comment_id}")

    async def toggle_like(self, comment_id: CommentId) -> Comment:
        return await self._client.data("PUT", f"/comments/{comment_id}/like", Comment)

    async def update_reply(
        self, parent_id: CommentId, reply_id: CommentId, content: str
    ) -> Comment:
        return await self._client.data(
            "PUT",
            f"/comments/{parent_id}/replies/{reply_id}",
            Comment,
            json={"content": content},
        )

    async def delete_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        await self._client.call("DELETE", f"/comments/{parent_id}/replies/{reply_id}")

    async def toggle_reply_like(
        self, parent_id: CommentId, reply_id: CommentId
    ) -> Comment:
        return await self._client.data(
            "PUT", f"/comments/{parent_id}/replies/{reply_id}/like", Comment
        )
