"""Unit tests for the in-memory server."""

import pytest

from club.adapter.credential import InMemoryCredentialStore
from club.adapter.error import ApiError
from club.adapter.memory import (
    InMemoryBackend,
    InMemoryCommentRepository,
    InMemoryPostRepository,
)
from club.domain.value import PostStatus, UserRole
from tests.conftest import make_comment, make_post


@pytest.fixture
def backend():
    backend = InMemoryBackend(InMemoryCredentialStore())
    backend.add_user("ada@club.test", "secret", "ada", UserRole.MEMBER, user_id="u1")
    token, _ = backend.issue_token("ada@club.test", "secret")
    backend.credentials.set_token(token)
    return backend


class TestInMemoryBackend:
    """Tests for accounts and the failure queue."""

    def test_wrong_password(self, backend):
        with pytest.raises(ApiError) as exc_info:
            backend.issue_token("ada@club.test", "wrong")

        assert exc_info.value.is_unauthorized

    def test_failures_are_consumed_in_order(self, backend):
        backend.fail_next(times=2)

        for _ in range(2):
            with pytest.raises(ApiError):
                backend.record("posts.list_mine")
        backend.record("posts.list_mine")

        assert backend.calls == ["posts.list_mine"] * 3

    def test_cleared_token_is_unauthorized(self, backend):
        backend.credentials.clear()

        with pytest.raises(ApiError) as exc_info:
            backend.current_user()

        assert exc_info.value.status_code == 401


@pytest.mark.asyncio
class TestInMemoryRepositories:
    """Tests for server-side rules the views rely on."""

    async def test_new_comment_goes_first(self, backend):
        backend.comments = [make_comment("c1")]
        comments = InMemoryCommentRepository(backend)

        created = await comments.create("p1", "  Hello  ")

        assert created.content == "Hello"
        assert [c.id for c in backend.comments] == [created.id, "c1"]

    async def test_only_author_edits(self, backend):
        backend.comments = [make_comment("c1", author_id="u2")]
        comments = InMemoryCommentRepository(backend)

        with pytest.raises(ApiError) as exc_info:
            await comments.update("c1", "Edited")

        assert exc_info.value.status_code == 403

    async def test_illegal_status_change_is_refused(self, backend):
        backend.posts = [make_post("p1", status=PostStatus.PUBLISHED)]
        posts = InMemoryPostRepository(backend)

        with pytest.raises(ApiError) as exc_info:
            await posts.set_status("p1", PostStatus.DRAFT)

        assert exc_info.value.status_code == 400
