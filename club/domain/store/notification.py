"""Notification store with read-once semantics."""

from typing import Any

from club.domain.model.notification import Notification
from club.domain.store.base import EntityStore


class NotificationStore(EntityStore[Notification]):
    """Notifications, newest first.

    Once a notification is read, merges keep it read. Only ``replace_all``
    (server ground truth) or ``remove`` can change that.
    """

    def _merge(self, current: Notification, fields: dict[str, Any]) -> Notification:
        if current.is_read and fields.get("is_read") is False:
            fields = {**fields, "is_read": True, "read_at": current.read_at}
        return super()._merge(current, fields)

    @property
    def unread_count(self) -> int:
        return sum(1 for notification in self._items if not notification.is_read)
