"""Test configuration and fixtures."""

from datetime import datetime, timezone
from typing import Any, Optional

import logfire
import pytest

from club.adapter.memory import InMemoryBackend
from club.application.session import Session
from club.domain.model.comment import Comment
from club.domain.model.notification import Notification
from club.domain.model.post import Post
from club.domain.service.acknowledger import RecordingAcknowledger
from club.domain.value import NotificationType, PostStatus, UserRole


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep spans and logs local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    comment_id: str,
    author_id: str = "u1",
    post_id: str = "p1",
    likes: Optional[list[str]] = None,
    replies: Optional[list[Comment]] = None,
    content: Optional[str] = None,
    parent_id: Optional[str] = None,
) -> Comment:
    """Comment as the server returns it, with a populated author."""
    return Comment(
        id=comment_id,
        content=content or f"Comment {comment_id}",
        author={"_id": author_id, "username": f"user-{author_id}"},
        post_id=post_id,
        parent_id=parent_id,
        likes=likes or [],
        replies=replies or [],
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


def make_notification(
    notification_id: str,
    is_read: bool = False,
    type: NotificationType = NotificationType.COMMENT_ADDED,
    **kwargs: Any,
) -> Notification:
    return Notification(
        id=notification_id,
        type=type,
        title=kwargs.pop("title", "New Comment"),
        message=kwargs.pop("message", f"Notification {notification_id}"),
        is_read=is_read,
        **kwargs,
    )


def make_post(
    post_id: str,
    status: PostStatus = PostStatus.DRAFT,
    author_id: str = "u1",
    **kwargs: Any,
) -> Post:
    return Post(
        id=post_id,
        status=status,
        title=kwargs.pop("title", f"Post {post_id}"),
        author={"_id": author_id, "username": f"user-{author_id}"},
        **kwargs,
    )


async def sign_in(env, user_id: str = "u1", role: UserRole = UserRole.MEMBER):
    """Register a user on the in-memory server and log the session in.

    Clears the login toast so tests only see their own acknowledgements.
    """
    backend = await env.get(InMemoryBackend)
    email = f"{user_id}@club.test"
    backend.add_user(email, "secret", f"user-{user_id}", role, user_id=user_id)

    session = await env.get(Session)
    assert await session.login(email, "secret")

    recorder = await env.get(RecordingAcknowledger)
    recorder.clear()
    return session
