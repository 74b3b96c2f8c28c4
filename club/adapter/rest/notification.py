"""Notification repository backed by the REST API."""

from typing import List

from club.adapter.rest.client import ApiClient
from club.domain.model.notification import Notification
from club.domain.model.page import Page
from club.domain.repository.notification import NotificationRepository
from club.domain.value import NotificationId


class RestNotificationRepository(NotificationRepository):
    """Notifications under ``/notifications``."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def list_page(self, page: int = 1, limit: int = 20) -> Page[Notification]:
        envelope = await self._client.fetch(
            "GET",
            "/notifications",
            List[Notification],
            params={"page": page, "limit": limit},
        )
        items = envelope.data or []
        if envelope.pagination is None:
            return Page(items=items, page=page, pages=page, total=len(items))
        return Page(
            items=items,
            page=envelope.pagination.page,
            pages=envelope.pagination.pages,
            total=envelope.pagination.total,
        )

    async def unread_count(self) -> int:
        envelope = await self._client.fetch("GET", "/notifications/unread/count", int)
        return envelope.count or 0

    async def mark_read(self, notification_id: NotificationId) -> Notification:
        return await self._client.data(
            "PUT", f"/notifications/{notification_id}/read", Notification
        )

    async def mark_all_read(self) -> None:
        await self._client.call("PUT", "/notifications/mark-all-read")

    async def delete(self, notification_id: NotificationId) -> None:
        await self._client.call("DELETE", f"/notifications/{notification_id}")

    async def clear_read(self) -> None:
        await self._client.call("DELETE", "/notifications/read/clear")
