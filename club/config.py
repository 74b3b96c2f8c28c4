"""Application configuration."""

from typing import Literal
from pydantic import BaseModel, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    """REST API configuration."""

    # Base URL including the /api prefix used by every resource route
    base_url: str = "http://localhost:5000/api"

    # Per-request timeout in seconds
    timeout: float = 30.0


class ChannelSettings(BaseModel):
    """Push channel (socket.io) configuration."""

    url: str = "http://localhost:5000"
    socketio_path: str = "socket.io"
    transports: list[Literal["websocket", "polling"]] = ["websocket", "polling"]

    # Seconds to wait for the namespace handshake after the transport connects
    wait_timeout: float = 10.0

    # Transport-level reconnection. Off by default: a dropped channel leaves
    # the client in fetch-only mode until the next login.
    reconnection: bool = False


class FeedSettings(BaseModel):
    """Notification feed paging."""

    page_size: int = 20

    # Compact dropdown shows only the newest few
    dropdown_size: int = 5


class ObservabilitySettings(BaseModel):
    """Logfire export settings."""

    # OBSERVABILITY__LOGFIRE_TOKEN; without it logs stay on the console
    logfire_token: str | None = None

    # Explicit override; None means "send if a token is set"
    send_to_logfire: bool | None = None

    def resolve_send(self) -> bool:
        if self.send_to_logfire is not None:
            return self.send_to_logfire
        return bool(self.logfire_token)


class Settings(BaseSettings):
    """Client settings.

    Set environment variables to override, using ``__`` for nesting:

        API__BASE_URL=https://club.example.org/api
        CHANNEL__URL=https://club.example.org
        FEED__PAGE_SIZE=50
        ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows API__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    api: ApiSettings = ApiSettings()
    channel: ChannelSettings = ChannelSettings()
    feed: FeedSettings = FeedSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @computed_field
    @property
    def service_name(self) -> str:
        """Service name reported to Logfire."""
        return "club-sync" if self.environment == "production" else f"club-sync-{self.environment}"
