"""In-memory authentication repository for testing."""

from club.adapter.memory.backend import InMemoryBackend
from club.domain.model.user import SessionUser
from club.domain.repository.auth import AuthRepository


class InMemoryAuthRepository(AuthRepository):
    """Checks credentials against the backend's registered accounts."""

    def __init__(self, backend: InMemoryBackend) -> None:
        self._backend = backend

    async def login(self, email: str, password: str) -> tuple[str, SessionUser]:
        self._backend.record("auth.login")
        return self._backend.issue_token(email, password)

    async def me(self) -> SessionUser:
        self._backend.record("auth.me")
        return self._backend.current_user()
