"""In-memory stand-in for the club API server.

Holds the server-side state shared by the in-memory repositories and lets
tests queue failures for upcoming calls.
"""

import itertools
from datetime import datetime, timezone
from typing import Optional

from club.adapter.error import AdapterError, ApiError
from club.domain.model.comment import Comment
from club.domain.model.notification import Notification
from club.domain.model.post import Post
from club.domain.model.user import Author, SessionUser
from club.domain.repository.auth import CredentialStore
from club.domain.value import UserId, UserRole


class InMemoryBackend:
    """Server state for tests and offline runs.

    Every repository call is recorded in ``calls`` by name, then checked
    against the failure queue: a queued error is raised instead of running
    the call.
    """

    def __init__(self, credentials: CredentialStore) -> None:
        self.credentials = credentials
        self.comments: list[Comment] = []
        self.notifications: list[Notification] = []
        self.posts: list[Post] = []
        self.calls: list[str] = []
        self._accounts: dict[str, tuple[str, SessionUser]] = {}
        self._tokens: dict[str, SessionUser] = {}
        self._failures: list[AdapterError] = []
        self._ids = itertools.count(1)

    def add_user(
        self,
        email: str,
        password: str,
        username: str,
        role: UserRole = UserRole.USER,
        user_id: Optional[str] = None,
    ) -> SessionUser:
        user = SessionUser(
            id=UserId(user_id or self.next_id("u")),
            username=username,
            email=email,
            role=role,
        )
        self._accounts[email] = (password, user)
        return user

    def issue_token(self, email: str, password: str) -> tuple[str, SessionUser]:
        account = self._accounts.get(email)
        if account is None or account[0] != password:
            raise ApiError("POST", "/auth/login", 401, "Invalid credentials")
        user = account[1]
        token = f"token-{user.id}-{next(self._ids)}"
        self._tokens[token] = user
        return token, user

    def fail_next(self, error: Optional[AdapterError] = None, times: int = 1) -> None:
        """Make the next ``times`` calls raise ``error``."""
        error = error or ApiError("GET", "/", 500, "Internal Server Error")
        self._failures.extend([error] * times)

    def record(self, call: str) -> None:
        """Log ``call`` and raise the next queued failure, if any."""
        self.calls.append(call)
        if self._failures:
            raise self._failures.pop(0)

    def current_user(self) -> SessionUser:
        token = self.credentials.get_token()
        user = self._tokens.get(token) if token else None
        if user is None:
            raise ApiError("GET", "/", 401, "Not authorized to access this route")
        return user

    def current_author(self) -> Author:
        user = self.current_user()
        return Author(id=user.id, username=user.username, role=user.role)

    def next_id(self, prefix: str) -> str:
        return f"{prefix}{next(self._ids)}"

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)
