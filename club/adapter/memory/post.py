"""In-memory post repository for testing."""

from typing import List, Optional

from club.adapter.error import ApiError
from club.adapter.memory.backend import InMemoryBackend
from club.domain.error import InvalidTransitionError
from club.domain.model.common import toggle_like
from club.domain.model.post import Post
from club.domain.repository.post import PostRepository
from club.domain.value import PostId, PostStatus


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, backend: InMemoryBackend) -> None:
        self._backend = backend

    async def list_mine(self, status: Optional[PostStatus] = None) -> List[Post]:
        self._backend.record("posts.list_mine")
        user = self._backend.current_user()
        return [
            p
            for p in self._backend.posts
            if p.author is not None
            and p.author.id == user.id
            and (status is None or p.status == status)
        ]

    async def count_mine(self, status: PostStatus) -> int:
        self._backend.record("posts.count_mine")
        user = self._backend.current_user()
        return sum(
            1
            for p in self._backend.posts
            if p.author is not None and p.author.id == user.id and p.status == status
        )

    async def list_pending(self) -> List[Post]:
        self._backend.record("posts.list_pending")
        self._require_admin("/posts/pending")
        return [p for p in self._backend.posts if p.status == PostStatus.PENDING]

    async def list_edit_requests(self) -> List[Post]:
        self._backend.record("posts.list_edit_requests")
        self._require_admin("/posts/pending-edit-requests")
        return [
            p
            for p in self._backend.posts
            if p.status == PostStatus.PUBLISHED and p.has_pending_edit
        ]

    async def set_status(self, post_id: PostId, status: PostStatus) -> Post:
        self._backend.record("posts.set_status")
        post = self._get(post_id)
        try:
            fields = post.status_fields(status)
        except InvalidTransitionError as e:
            raise ApiError("PUT", f"/posts/{post_id}", 400, str(e)) from e
        return self._save(post.model_copy(update=fields))

    async def delete(self, post_id: PostId) -> None:
        self._backend.record("posts.delete")
        self._get(post_id)
        self._backend.posts = [p for p in self._backend.posts if p.id != post_id]

    async def approve(self, post_id: PostId) -> Post:
        self._backend.record("posts.approve")
        self._require_admin(f"/posts/{post_id}/approve")
        post = self._get(post_id)
        if post.status != PostStatus.PENDING:
            raise ApiError("PUT", f"/posts/{post_id}/approve", 400, "Post is not pending approval")
        fields = post.status_fields(PostStatus.PUBLISHED)
        return self._save(post.model_copy(update={**fields, "published_at": self._backend.now()}))

    async def reject(self, post_id: PostId, reason: str) -> Post:
        self._backend.record("posts.reject")
        self._require_admin(f"/posts/{post_id}/reject")
        if not reason.strip():
            raise ApiError("PUT", f"/posts/{post_id}/reject", 400, "Please provide a rejection reason")
        post = self._get(post_id)
        if post.status != PostStatus.PENDING:
            raise ApiError("PUT", f"/posts/{post_id}/reject", 400, "Post is not pending approval")
        return self._save(post.model_copy(update=post.status_fields(PostStatus.REJECTED, reason)))

    async def approve_edit(self, post_id: PostId) -> Post:
        self._backend.record("posts.approve_edit")
        self._require_admin(f"/posts/{post_id}/approve-edit")
        post = self._pending_edit(post_id)
        edit = post.pending_edit
        fields = {"pending_edit": None, "updated_at": self._backend.now()}
        if edit is not None and edit.title:
            fields["title"] = edit.title
        return self._save(post.model_copy(update=fields))

    async def reject_edit(self, post_id: PostId, reason: str) -> Post:
        self._backend.record("posts.reject_edit")
        self._require_admin(f"/posts/{post_id}/reject-edit")
        if not reason.strip():
            raise ApiError(
                "PUT", f"/posts/{post_id}/reject-edit", 400, "Please provide a rejection reason"
            )
        post = self._pending_edit(post_id)
        return self._save(post.model_copy(update={"pending_edit": None}))

    async def toggle_like(self, post_id: PostId) -> Post:
        self._backend.record("posts.like")
        user = self._backend.current_user()
        post = self._get(post_id)
        return self._save(post.model_copy(update={"likes": toggle_like(post.likes, user.id)}))

    def _get(self, post_id: PostId) -> Post:
        post = next((p for p in self._backend.posts if p.id == post_id), None)
        if post is None:
            raise ApiError("GET", f"/posts/{post_id}", 404, "Post not found")
        return post

    def _pending_edit(self, post_id: PostId) -> Post:
        post = self._get(post_id)
        if not post.has_pending_edit:
            raise ApiError("PUT", f"/posts/{post_id}", 400, "No pending edit request")
        return post

    def _save(self, post: Post) -> Post:
        self._backend.posts = [post if p.id == post.id else p for p in self._backend.posts]
        return post

    def _require_admin(self, path: str) -> None:
        if not self._backend.current_user().is_admin:
            raise ApiError("GET", path, 403, "User role USER is not authorized to access this route")
