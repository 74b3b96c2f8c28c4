"""Unit tests for the post list views and the dashboard."""

import pytest

from club.adapter.memory import InMemoryBackend, InMemoryPushChannel
from club.application.view import (
    Dashboard,
    DraftPosts,
    EditRequests,
    MyPosts,
    PendingPosts,
)
from club.domain.error import InvalidTransitionError, NotAuthorizedError
from club.domain.model.post import PendingEdit
from club.domain.service.acknowledger import RecordingAcknowledger
from club.domain.value import PostStatus, UserRole
from tests.conftest import make_post, sign_in
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.mark.asyncio
class TestDraftPosts:
    """Tests for the drafts list."""

    async def test_submit_then_status_push(self, unit_env):
        """A submitted draft leaves the list; the push updates My Posts."""
        # Arrange
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        channel = await unit_env.get(InMemoryPushChannel)
        backend.posts = [make_post("p1"), make_post("p2")]
        drafts = await unit_env.get(DraftPosts)
        mine = await unit_env.get(MyPosts)

        async with drafts, mine:
            # Act
            result = await drafts.submit_for_review("p1")

            # Assert
            assert result.ok
            assert [p.id for p in drafts.posts] == ["p2"]
            assert backend.posts[0].status == PostStatus.PENDING

            channel.emit("post:status_changed", {"postId": "p1", "newStatus": "pending"})

            assert mine.store.get("p1").status == PostStatus.PENDING
            assert mine.store.get("p2").status == PostStatus.DRAFT

    async def test_submit_rejects_non_draft_locally(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        recorder = await unit_env.get(RecordingAcknowledger)
        backend.posts = [make_post("p1")]
        drafts = await unit_env.get(DraftPosts)
        await drafts.fetch()
        drafts.store.patch("p1", status=PostStatus.PUBLISHED)
        backend.calls.clear()

        result = await drafts.submit_for_review("p1")

        assert not result.ok
        assert isinstance(result.error, InvalidTransitionError)
        assert backend.calls == []
        assert drafts.store.get("p1") is not None
        assert recorder.messages() == ["Only drafts can be submitted for review"]

    async def test_submit_failure_restores_draft(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        recorder = await unit_env.get(RecordingAcknowledger)
        backend.posts = [make_post("p1")]
        drafts = await unit_env.get(DraftPosts)
        await drafts.fetch()
        backend.fail_next()

        result = await drafts.submit_for_review("p1")

        assert not result.ok
        assert [p.id for p in drafts.posts] == ["p1"]
        assert recorder.messages("error") == ["Internal Server Error"]

    async def test_draft_deleted_push(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        channel = await unit_env.get(InMemoryPushChannel)
        backend.posts = [make_post("p1"), make_post("p2")]

        async with await unit_env.get(DraftPosts) as drafts:
            channel.emit("post:draft_deleted", "p1")
            channel.emit("post:draft_deleted", {"postId": "missing"})

            assert [p.id for p in drafts.posts] == ["p2"]

    async def test_delete_draft(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        recorder = await unit_env.get(RecordingAcknowledger)
        backend.posts = [make_post("p1")]
        drafts = await unit_env.get(DraftPosts)
        await drafts.fetch()

        await drafts.delete("p1")

        assert drafts.posts == []
        assert backend.posts == []
        assert recorder.messages("success") == ["Draft deleted successfully"]


@pytest.mark.asyncio
class TestMyPosts:
    """Tests for the session user's posts."""

    async def test_like_twice_restores_likes(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        backend.posts = [make_post("p1", status=PostStatus.PUBLISHED, likes=["u2"])]
        mine = await unit_env.get(MyPosts)
        await mine.fetch()

        await mine.like("p1")
        assert mine.store.get("p1").likes == ["u2", "u1"]

        await mine.like("p1")
        assert mine.store.get("p1").likes == ["u2"]
        assert backend.posts[0].likes == ["u2"]

    async def test_like_requires_login(self, unit_env):
        recorder = await unit_env.get(RecordingAcknowledger)
        mine = await unit_env.get(MyPosts)

        result = await mine.like("p1")

        assert not result.ok
        assert recorder.messages() == ["Login to like posts"]

    async def test_filtered_list_drops_posts_leaving_the_filter(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        channel = await unit_env.get(InMemoryPushChannel)
        backend.posts = [
            make_post("p1", status=PostStatus.PENDING),
            make_post("p2", status=PostStatus.PENDING),
            make_post("p3", status=PostStatus.PUBLISHED),
        ]
        mine = await unit_env.get(MyPosts)

        async with mine:
            assert await mine.filter(PostStatus.PENDING)
            assert [p.id for p in mine.posts] == ["p1", "p2"]

            channel.emit(
                "post:status_changed",
                {"postId": "p1", "newStatus": "rejected", "rejectionReason": "Off topic"},
            )
            channel.emit("post:status_changed", {"postId": "p2", "newStatus": "pending"})

            assert [p.id for p in mine.posts] == ["p2"]

    async def test_rejection_reason_follows_status(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        channel = await unit_env.get(InMemoryPushChannel)
        backend.posts = [make_post("p1", status=PostStatus.PENDING)]

        async with await unit_env.get(MyPosts) as mine:
            channel.emit(
                "post:status_changed",
                {"postId": "p1", "newStatus": "rejected", "rejectionReason": "Off topic"},
            )

            post = mine.store.get("p1")
            assert post.status == PostStatus.REJECTED
            assert post.rejection_reason == "Off topic"

    async def test_deleted_push(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        channel = await unit_env.get(InMemoryPushChannel)
        backend.posts = [make_post("p1"), make_post("p2")]

        async with await unit_env.get(MyPosts) as mine:
            channel.emit("post:deleted", {"postId": "p2"})

            assert [p.id for p in mine.posts] == ["p1"]

    async def test_other_authors_posts_are_not_listed(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        backend.posts = [make_post("p1"), make_post("p2", author_id="u2")]
        mine = await unit_env.get(MyPosts)

        await mine.fetch()

        assert [p.id for p in mine.posts] == ["p1"]

    async def test_pushes_after_close_are_ignored(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        channel = await unit_env.get(InMemoryPushChannel)
        backend.posts = [make_post("p1")]
        mine = await unit_env.get(MyPosts)

        async with mine:
            pass
        channel.emit("post:deleted", "p1")

        assert mine.subscriptions == 0
        assert [p.id for p in mine.posts] == ["p1"]

    async def test_bind_does_not_accumulate(self, unit_env):
        await sign_in(unit_env)
        channel = await unit_env.get(InMemoryPushChannel)
        mine = await unit_env.get(MyPosts)

        mine.bind()
        mine.bind()

        assert mine.subscriptions == 2
        assert channel.listener_count("post:status_changed") == 1
        mine.close()
        assert channel.listener_count("post:status_changed") == 0


@pytest.mark.asyncio
class TestPendingPosts:
    """Tests for the admin approval queue."""

    async def test_approve(self, unit_env):
        await sign_in(unit_env, user_id="a1", role=UserRole.ADMIN)
        backend = await unit_env.get(InMemoryBackend)
        recorder = await unit_env.get(RecordingAcknowledger)
        backend.posts = [make_post("p1", status=PostStatus.PENDING)]
        pending = await unit_env.get(PendingPosts)
        await pending.fetch()

        result = await pending.approve("p1")

        assert result.ok
        assert pending.posts == []
        assert backend.posts[0].status == PostStatus.PUBLISHED
        assert recorder.messages("success") == ["Post approved successfully"]

    async def test_reject_requires_reason(self, unit_env):
        await sign_in(unit_env, user_id="a1", role=UserRole.ADMIN)
        backend = await unit_env.get(InMemoryBackend)
        recorder = await unit_env.get(RecordingAcknowledger)
        backend.posts = [make_post("p1", status=PostStatus.PENDING)]
        pending = await unit_env.get(PendingPosts)
        await pending.fetch()
        backend.calls.clear()

        result = await pending.reject("p1", "   ")

        assert not result.ok
        assert backend.calls == []
        assert [p.id for p in pending.posts] == ["p1"]
        assert recorder.messages() == ["Please provide a rejection reason"]

    async def test_reject(self, unit_env):
        await sign_in(unit_env, user_id="a1", role=UserRole.ADMIN)
        backend = await unit_env.get(InMemoryBackend)
        backend.posts = [make_post("p1", status=PostStatus.PENDING)]
        pending = await unit_env.get(PendingPosts)
        await pending.fetch()

        result = await pending.reject("p1", "Off topic")

        assert result.ok
        assert pending.posts == []
        assert backend.posts[0].status == PostStatus.REJECTED
        assert backend.posts[0].rejection_reason == "Off topic"

    async def test_member_cannot_approve(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        recorder = await unit_env.get(RecordingAcknowledger)
        backend.posts = [make_post("p1", status=PostStatus.PENDING)]
        pending = await unit_env.get(PendingPosts)
        backend.calls.clear()

        result = await pending.approve("p1")

        assert isinstance(result.error, NotAuthorizedError)
        assert backend.calls == []
        assert recorder.messages() == ["Admin access required"]

    async def test_queue_follows_pushes(self, unit_env):
        await sign_in(unit_env, user_id="a1", role=UserRole.ADMIN)
        backend = await unit_env.get(InMemoryBackend)
        channel = await unit_env.get(InMemoryPushChannel)
        backend.posts = [make_post("p1", status=PostStatus.PENDING)]

        async with await unit_env.get(PendingPosts) as pending:
            channel.emit("post:pending", {"_id": "p2", "status": "pending", "title": "New"})
            channel.emit("post:pending", {"_id": "p3", "status": "draft", "title": "Stale"})
            assert [p.id for p in pending.posts] == ["p2", "p1"]

            channel.emit("post:approval_change", {"postId": "p1", "status": "published"})
            assert [p.id for p in pending.posts] == ["p2"]

    async def test_approve_failure_restores_queue(self, unit_env):
        await sign_in(unit_env, user_id="a1", role=UserRole.ADMIN)
        backend = await unit_env.get(InMemoryBackend)
        backend.posts = [make_post("p1", status=PostStatus.PENDING)]
        pending = await unit_env.get(PendingPosts)
        await pending.fetch()
        backend.fail_next()

        result = await pending.approve("p1")

        assert not result.ok
        assert [p.id for p in pending.posts] == ["p1"]


@pytest.mark.asyncio
class TestEditRequests:
    """Tests for the admin edit-request queue."""

    async def test_approve_edit_applies_title(self, unit_env):
        await sign_in(unit_env, user_id="a1", role=UserRole.ADMIN)
        backend = await unit_env.get(InMemoryBackend)
        backend.posts = [
            make_post(
                "p1",
                status=PostStatus.PUBLISHED,
                pending_edit=PendingEdit(title="Better title"),
            ),
            make_post("p2", status=PostStatus.PUBLISHED),
        ]
        requests = await unit_env.get(EditRequests)
        await requests.fetch()
        assert [p.id for p in requests.posts] == ["p1"]

        result = await requests.approve_edit("p1")

        assert result.ok
        assert requests.posts == []
        assert backend.posts[0].title == "Better title"
        assert backend.posts[0].pending_edit is None

    async def test_reject_edit_requires_reason(self, unit_env):
        await sign_in(unit_env, user_id="a1", role=UserRole.ADMIN)
        recorder = await unit_env.get(RecordingAcknowledger)
        requests = await unit_env.get(EditRequests)

        result = await requests.reject_edit("p1", "")

        assert not result.ok
        assert recorder.messages() == ["Please provide a rejection reason"]

    async def test_member_fetch_fails(self, unit_env):
        await sign_in(unit_env)
        recorder = await unit_env.get(RecordingAcknowledger)
        requests = await unit_env.get(EditRequests)

        assert not await requests.fetch()
        assert recorder.messages() == ["Failed to fetch edit requests"]


@pytest.mark.asyncio
class TestDashboard:
    """Tests for the dashboard counters."""

    async def test_counts_per_status(self, unit_env):
        await sign_in(unit_env)
        backend = await unit_env.get(InMemoryBackend)
        backend.posts = [
            make_post("p1"),
            make_post("p2", status=PostStatus.PENDING),
            make_post("p3", status=PostStatus.PUBLISHED),
            make_post("p4", status=PostStatus.PUBLISHED),
            make_post("p5", status=PostStatus.PUBLISHED, author_id="u2"),
        ]
        dashboard = await unit_env.get(Dashboard)

        await dashboard.fetch()

        assert dashboard.stats.published == 2
        assert dashboard.stats.drafts == 1
        assert dashboard.stats.pending == 1
        assert dashboard.stats.rejected == 0

    async def test_stats_push_replaces_counts(self, unit_env):
        await sign_in(unit_env)
        channel = await unit_env.get(InMemoryPushChannel)

        async with await unit_env.get(Dashboard) as dashboard:
            channel.emit(
                "dashboard:stats_updated",
                {"published": 3, "drafts": 1, "pending": 0, "rejected": 2},
            )

            assert dashboard.stats.published == 3
            assert dashboard.stats.rejected == 2
