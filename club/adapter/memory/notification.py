"""In-memory notification repository for testing."""

import math

from club.adapter.error import ApiError
from club.adapter.memory.backend import InMemoryBackend
from club.domain.model.notification import Notification
from club.domain.model.page import Page
from club.domain.repository.notification import NotificationRepository
from club.domain.value import NotificationId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, backend: InMemoryBackend) -> None:
        self._backend = backend

    async def list_page(self, page: int = 1, limit: int = 20) -> Page[Notification]:
        self._backend.record("notifications.list")
        notifications = self._backend.notifications
        start = (page - 1) * limit
        return Page(
            items=notifications[start : start + limit],
            page=page,
            pages=math.ceil(len(notifications) / limit),
            total=len(notifications),
        )

    async def unread_count(self) -> int:
        self._backend.record("notifications.unread_count")
        return sum(1 for n in self._backend.notifications if not n.is_read)

    async def mark_read(self, notification_id: NotificationId) -> Notification:
        self._backend.record("notifications.mark_read")
        for i, notification in enumerate(self._backend.notifications):
            if notification.id == notification_id:
                updated = notification.model_copy(
                    update={"is_read": True, "read_at": self._backend.now()}
                )
                self._backend.notifications[i] = updated
                return updated
        raise ApiError(
            "PUT", f"/notifications/{notification_id}/read", 404, "Notification not found"
        )

    async def mark_all_read(self) -> None:
        self._backend.record("notifications.mark_all_read")
        now = self._backend.now()
        self._backend.notifications = [
            n if n.is_read else n.model_copy(update={"is_read": True, "read_at": now})
            for n in self._backend.notifications
        ]

    async def delete(self, notification_id: NotificationId) -> None:
        self._backend.record("notifications.delete")
        remaining = [n for n in self._backend.notifications if n.id != notification_id]
        if len(remaining) == len(self._backend.notifications):
            raise ApiError(
                "DELETE", f"/notifications/{notification_id}", 404, "Notification not found"
            )
        self._backend.notifications = remaining

    async def clear_read(self) -> None:
        self._backend.record("notifications.clear_read")
        self._backend.notifications = [n for n in self._backend.notifications if not n.is_read]
