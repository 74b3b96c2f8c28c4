"""Post lists: the member's own posts and drafts, and the admin queues."""

from typing import Optional

from club.application.listener import RealtimeListener
from club.application.mutator import MutationResult, OptimisticMutator
from club.application.session import Session
from club.application.view.base import View
from club.domain.error import InvalidTransitionError, ValidationError
from club.domain.model.common import toggle_like
from club.domain.model.event import ApprovalChange, StatusChanged
from club.domain.model.post import Post
from club.domain.repository.post import PostRepository
from club.domain.store import EntityStore
from club.domain.value import PostId, PostStatus, PushEvent


class PostListView(View):
    """A list of posts backed by one repository query."""

    def __init__(
        self,
        posts: PostRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> None:
        super().__init__(mutator, listener, session)
        self.store: EntityStore[Post] = EntityStore()
        self._posts = posts

    @property
    def posts(self) -> list[Post]:
        return self.store.snapshot()

    def _check_transition(
        self, action: str, post_id: PostId, target: PostStatus, message: str
    ) -> Optional[MutationResult]:
        """Rejected result if the local entry cannot move to ``target``."""
        post = self.store.get(post_id)
        if post is None:
            return None
        try:
            post.status_fields(target)
        except InvalidTransitionError as e:
            return self._mutator.reject(action, message, e)
        return None


class MyPosts(PostListView):
    """The session user's posts, optionally filtered to one status.

    A pushed status change patches the entry in place, or drops it when the
    new status no longer matches the filter.
    """

    fetch_failure = "Failed to fetch posts"

    def __init__(
        self,
        posts: PostRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
        status: Optional[PostStatus] = None,
    ) -> None:
        super().__init__(posts, mutator, listener, session)
        self.status = status

    async def _reload(self) -> None:
        self.store.replace_all(await self._posts.list_mine(self.status))

    def _bind(self) -> None:
        self._listen(PushEvent.POST_STATUS_CHANGED, self._status_changed)
        self._listen(PushEvent.POST_DELETED, self.store.remove)

    def _status_changed(self, change: StatusChanged) -> None:
        if self.status is not None and change.new_status != self.status:
            self.store.remove(change.post_id)
            return
        self.store.patch(
            change.post_id,
            status=change.new_status,
            rejection_reason=(
                change.rejection_reason if change.new_status == PostStatus.REJECTED else None
            ),
        )

    async def filter(self, status: Optional[PostStatus]) -> bool:
        """Switch the status filter and refetch."""
        self.status = status
        return await self.fetch()

    async def delete(self, post_id: PostId) -> MutationResult:
        return await self._mutator.run(
            "delete_post",
            effect=lambda: self.store.remove(post_id),
            request=lambda: self._posts.delete(post_id),
            rollback=self._reload,
            failure="Failed to delete post",
            success="Post deleted successfully",
        )

    async def like(self, post_id: PostId) -> MutationResult:
        rejected = self._require_login("like_post", "Login to like posts")
        if rejected is not None:
            return rejected
        user_id = self._session.user_id

        return await self._mutator.run(
            "like_post",
            effect=lambda: self.store.update(
                post_id, lambda p: {"likes": toggle_like(p.likes, user_id)}
            ),
            request=lambda: self._posts.toggle_like(post_id),
            rollback=self._reload,
            failure="Failed to update like",
        )


class DraftPosts(PostListView):
    """The session user's drafts."""

    fetch_failure = "Failed to fetch drafts"

    async def _reload(self) -> None:
        self.store.replace_all(await self._posts.list_mine(PostStatus.DRAFT))

    def _bind(self) -> None:
        self._listen(PushEvent.POST_DRAFT_DELETED, self.store.remove)

    async def delete(self, post_id: PostId) -> MutationResult:
        return await self._mutator.run(
            "delete_draft",
            effect=lambda: self.store.remove(post_id),
            request=lambda: self._posts.delete(post_id),
            rollback=self._reload,
            failure="Failed to delete draft",
            success="Draft deleted successfully",
        )

    async def submit_for_review(self, post_id: PostId) -> MutationResult:
        """Move a draft to pending; it leaves this list at once."""
        rejected = self._check_transition(
            "submit_for_review",
            post_id,
            PostStatus.PENDING,
            "Only drafts can be submitted for review",
        )
        if rejected is not None:
            return rejected

        return await self._mutator.run(
            "submit_for_review",
            effect=lambda: self.store.remove(post_id),
            request=lambda: self._posts.set_status(post_id, PostStatus.PENDING),
            rollback=self._reload,
            failure="Failed to submit post",
            success="Post submitted for review",
        )


class PendingPosts(PostListView):
    """Admin queue of posts awaiting approval."""

    fetch_failure = "Failed to fetch pending posts"

    async def _reload(self) -> None:
        self.store.replace_all(await self._posts.list_pending())

    def _bind(self) -> None:
        self._listen(PushEvent.POST_PENDING, self._arrived)
        self._listen(PushEvent.POST_APPROVAL_CHANGE, self._left)

    def _arrived(self, post: Post) -> None:
        if post.status == PostStatus.PENDING:
            self.store.insert_front(post)

    def _left(self, change: ApprovalChange) -> None:
        self.store.remove(change.post_id)

    async def approve(self, post_id: PostId) -> MutationResult:
        rejected = self._require_admin("approve_post") or self._check_transition(
            "approve_post", post_id, PostStatus.PUBLISHED, "Post is not pending approval"
        )
        if rejected is not None:
            return rejected

        return await self._mutator.run(
            "approve_post",
            effect=lambda: self.store.remove(post_id),
            request=lambda: self._posts.approve(post_id),
            rollback=self._reload,
            failure="Failed to approve post",
            success="Post approved successfully",
        )

    async def reject(self, post_id: PostId, reason: str) -> MutationResult:
        rejected = self._require_admin("reject_post")
        if rejected is not None:
            return rejected
        if not reason.strip():
            return self._mutator.reject(
                "reject_post",
                "Please provide a rejection reason",
                ValidationError("empty rejection reason"),
            )
        rejected = self._check_transition(
            "reject_post", post_id, PostStatus.REJECTED, "Post is not pending approval"
        )
        if rejected is not None:
            return rejected

        return await self._mutator.run(
            "reject_post",
            effect=lambda: self.store.remove(post_id),
            request=lambda: self._posts.reject(post_id, reason),
            rollback=self._reload,
            failure="Failed to reject post",
            success="Post rejected",
        )


class EditRequests(PostListView):
    """Admin queue of published posts carrying a pending edit."""

    fetch_failure = "Failed to fetch edit requests"

    async def _reload(self) -> None:
        self.store.replace_all(await self._posts.list_edit_requests())

    async def approve_edit(self, post_id: PostId) -> MutationResult:
        rejected = self._require_admin("approve_edit")
        if rejected is not None:
            return rejected

        return await self._mutator.run(
            "approve_edit",
            effect=lambda: self.store.remove(post_id),
            request=lambda: self._posts.approve_edit(post_id),
            rollback=self._reload,
            failure="Failed to approve edit request",
            success="Edit request approved",
        )

    async def reject_edit(self, post_id: PostId, reason: str) -> MutationResult:
        rejected = self._require_admin("reject_edit")
        if rejected is not None:
            return rejected
        if not reason.strip():
            return self._mutator.reject(
                "reject_edit",
                "Please provide a rejection reason",
                ValidationError("empty rejection reason"),
            )

        return await self._mutator.run(
            "reject_edit",
            effect=lambda: self.store.remove(post_id),
            request=lambda: self._posts.reject_edit(post_id, reason),
            rollback=self._reload,
            failure="Failed to reject edit request",
            success="Edit request rejected",
        )
