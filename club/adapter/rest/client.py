"""REST gateway.

Thin wrapper over ``httpx.AsyncClient`` that attaches the session token,
unwraps the server's JSON envelope and turns every failure into an
``ApiError`` carrying the server's own message.
"""

from typing import Any, Generic, Optional, TypeVar

import httpx
import logfire
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from club.adapter.error import ApiError
from club.domain.error import ContractError
from club.domain.repository.auth import CredentialStore

T = TypeVar("T")


class Pagination(BaseModel):
    page: int = 1
    pages: int = 1
    total: int = 0


class Envelope(BaseModel, Generic[T]):
    """``{success, data, message?, count?, pagination?}`` response body."""

    model_config = ConfigDict(extra="ignore")

    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
    count: Optional[int] = None
    pagination: Optional[Pagination] = None


class ApiClient:
    """Authenticated JSON client for the club API."""

    def __init__(self, http: httpx.AsyncClient, credentials: CredentialStore) -> None:
        """Initialize the client.

        Args:
            http: Client configured with the API base URL and timeout
            credentials: Token source, read on every request
        """
        self._http = http
        self._credentials = credentials

    async def call(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Send one request and return the raw envelope.

        Raises:
            ApiError: On transport failure, a non-2xx status or ``success: false``
        """
        headers = {}
        token = self._credentials.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        with logfire.span("api.call", method=method, path=path):
            try:
                response = await self._http.request(
                    method, path, params=params, json=json, headers=headers
                )
            except httpx.HTTPError as e:
                logfire.warn(
                    "API request failed without response",
                    method=method,
                    path=path,
                    error=str(e),
                )
                raise ApiError(method, path, None) from e

            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}

            if response.status_code >= 400 or body.get("success") is False:
                logfire.warn(
                    "API request rejected",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                    message=body.get("message"),
                )
                raise ApiError(method, path, response.status_code, body.get("message"))

            return body

    async def fetch(
        self,
        method: str,
        path: str,
        data_type: Any,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Envelope[Any]:
        """Send one request and validate the envelope's ``data`` as ``data_type``.

        Raises:
            ApiError: As for ``call``
            ContractError: If the body does not match the expected shape
        """
        body = await self.call(method, path, params=params, json=json)
        try:
            return Envelope[data_type].model_validate(body)
        except PydanticValidationError as e:
            logfire.error("API response failed validation", method=method, path=path)
            raise ContractError(f"{method} {path}", str(e)) from e

    async def data(
        self,
        method: str,
        path: str,
        data_type: Any,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Like ``fetch`` but returns ``data``, which must be present.

        Raises:
            ContractError: If the envelope carries no data
        """
        envelope = await self.fetch(method, path, data_type, params=params, json=json)
        if envelope.data is None:
            raise ContractError(f"{method} {path}", "missing data")
        return envelope.data
