"""Process-local credential store."""

from typing import Optional

from club.domain.repository.auth import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    """Keeps the token for the lifetime of the process."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def get_token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None
