"""Notification repository interface."""

from abc import ABC, abstractmethod

from club.domain.model.notification import Notification
from club.domain.model.page import Page
from club.domain.value import NotificationId


class NotificationRepository(ABC):
    """Notifications addressed to the session user."""

    @abstractmethod
    async def list_page(self, page: int = 1, limit: int = 20) -> Page[Notification]:
        """One page of notifications, newest first."""
        pass

    @abstractmethod
    async def unread_count(self) -> int:
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> Notification:
        pass

    @abstractmethod
    async def mark_all_read(self) -> None:
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> None:
        pass

    @abstractmethod
    async def clear_read(self) -> None:
        """Delete every notification already read."""
        pass
