"""Authentication and credential interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from club.domain.model.user import SessionUser


class AuthRepository(ABC):
    """Server-side authentication endpoints."""

    @abstractmethod
    async def login(self, email: str, password: str) -> tuple[str, SessionUser]:
        """Exchange credentials for a token.

        Returns:
            Tuple of (token, user)
        """
        pass

    @abstractmethod
    async def me(self) -> SessionUser:
        """Resolve the user behind the stored token."""
        pass


class CredentialStore(ABC):
    """Where the session token lives between requests.

    The REST client reads the token on every request, so clearing it here
    takes effect immediately.
    """

    @abstractmethod
    def get_token(self) -> Optional[str]:
        pass

    @abstractmethod
    def set_token(self, token: str) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
