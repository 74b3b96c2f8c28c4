"""Authentication endpoints."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from club.adapter.rest.client import ApiClient
from club.domain.error import ContractError
from club.domain.model.user import SessionUser
from club.domain.repository.auth import AuthRepository


class LoginResponse(BaseModel):
    """Login answers with the token and user at the top level, not under ``data``."""

    success: bool = True
    message: Optional[str] = None
    token: str
    user: SessionUser


class RestAuthRepository(AuthRepository):
    """``/auth/login`` and ``/auth/me``."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def login(self, email: str, password: str) -> tuple[str, SessionUser]:
        body: dict[str, Any] = await self._client.call(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        try:
            response = LoginResponse.model_validate(body)
        except PydanticValidationError as e:
            raise ContractError("POST /auth/login", str(e)) from e

        logfire.info("Logged in", user_id=response.user.id, role=response.user.role.value)
        return response.token, response.user

    async def me(self) -> SessionUser:
        return await self._client.data("GET", "/auth/me", SessionUser)
