"""REST API infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from club.adapter.rest import (
    ApiClient,
    RestAuthRepository,
    RestCommentRepository,
    RestNotificationRepository,
    RestPostRepository,
)
from club.config import Settings
from club.domain.repository import (
    AuthRepository,
    CommentRepository,
    CredentialStore,
    NotificationRepository,
    PostRepository,
)
from club.util.di.base import ProviderBase
from club.util.error import ConfigurationError


class ApiProvider(ProviderBase):
    """API component base."""

    __mock_component__ = "api"


class ProdApiProvider(ApiProvider):
    """Production API provider talking to the club server over HTTP."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_http_client(self, settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared HTTP client, closed with the container.

        Raises:
            ConfigurationError: If no API base URL is configured
        """
        if not settings.api.base_url:
            raise ConfigurationError("API__BASE_URL", "must be set")

        async with httpx.AsyncClient(
            base_url=settings.api.base_url, timeout=settings.api.timeout
        ) as client:
            yield client
        logfire.info("HTTP client closed")

    @provide(scope=Scope.APP)
    def get_api_client(
        self, http: httpx.AsyncClient, credentials: CredentialStore
    ) -> ApiClient:
        return ApiClient(http, credentials)

    @provide(scope=Scope.APP)
    def get_auth_repository(self, client: ApiClient) -> AuthRepository:
        return RestAuthRepository(client)

    @provide(scope=Scope.APP)
    def get_comment_repository(self, client: ApiClient) -> CommentRepository:
        return RestCommentRepository(client)

    @provide(scope=Scope.APP)
    def get_notification_repository(self, client: ApiClient) -> NotificationRepository:
        return RestNotificationRepository(client)

    @provide(scope=Scope.APP)
    def get_post_repository(self, client: ApiClient) -> PostRepository:
        return RestPostRepository(client)
