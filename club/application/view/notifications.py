"""Notification feed."""

import logfire

from club.application.listener import RealtimeListener
from club.application.mutator import MUTATION_ERRORS, MutationResult, OptimisticMutator
from club.application.session import Session
from club.application.view.base import View
from club.config import FeedSettings
from club.domain.model.notification import Notification
from club.domain.repository.notification import NotificationRepository
from club.domain.store import NotificationStore
from club.domain.value import NotificationId, PushEvent


class NotificationFeed(View):
    """The session user's notifications, newest first, paged.

    Page 1 replaces the store; later pages append. Pushed notifications go
    to the front. Every rollback reloads page 1.
    """

    fetch_failure = "Failed to fetch notifications"

    def __init__(
        self,
        notifications: NotificationRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
        limit: int = 20,
    ) -> None:
        super().__init__(mutator, listener, session)
        self.store = NotificationStore()
        self.limit = limit
        self.page = 0
        self.pages = 0
        self.total = 0
        self._notifications = notifications

    @property
    def notifications(self) -> list[Notification]:
        return self.store.snapshot()

    @property
    def unread_count(self) -> int:
        """Unread notifications among those loaded."""
        return self.store.unread_count

    @property
    def has_more(self) -> bool:
        return self.page < self.pages

    async def _reload(self) -> None:
        result = await self._notifications.list_page(1, self.limit)
        self.store.replace_all(result.items)
        self.page, self.pages, self.total = result.page, result.pages, result.total

    def _bind(self) -> None:
        self._listen(PushEvent.NOTIFICATION, self.store.insert_front)

    async def load_more(self) -> bool:
        """Append the next page, if there is one.

        Returns:
            True if a page was appended
        """
        if not self.has_more:
            return False
        self.loading = True
        try:
            result = await self._notifications.list_page(self.page + 1, self.limit)
        except MUTATION_ERRORS as e:
            logfire.error("Loading next page failed", page=self.page + 1, error=str(e))
            self._mutator.acknowledger.error(self.fetch_failure)
            return False
        finally:
            self.loading = False
        self.store.append_all(result.items)
        self.page, self.pages, self.total = result.page, result.pages, result.total
        return True

    async def count_unread(self) -> int:
        """Unread count across all pages, as the server sees it.

        Falls back to the loaded count when the server cannot be reached.
        """
        try:
            return await self._notifications.unread_count()
        except MUTATION_ERRORS as e:
            logfire.warn("Unread count failed", error=str(e))
            return self.unread_count

    async def mark_read(self, notification_id: NotificationId) -> MutationResult:
        current = self.store.get(notification_id)
        if current is not None and current.is_read:
            return MutationResult(ok=True, data=current)

        return await self._mutator.run(
            "mark_read",
            effect=lambda: self.store.patch(notification_id, is_read=True),
            request=lambda: self._notifications.mark_read(notification_id),
            rollback=self._reload,
            failure="Failed to mark notification as read",
        )

    async def mark_all_read(self) -> MutationResult:
        return await self._mutator.run(
            "mark_all_read",
            effect=lambda: self.store.map_all(is_read=True),
            request=self._notifications.mark_all_read,
            rollback=self._reload,
            failure="Failed to mark all as read",
        )

    async def delete(self, notification_id: NotificationId) -> MutationResult:
        return await self._mutator.run(
            "delete_notification",
            effect=lambda: self.store.remove(notification_id),
            request=lambda: self._notifications.delete(notification_id),
            rollback=self._reload,
            failure="Failed to delete notification",
            success="Notification deleted",
        )

    async def clear_read(self) -> MutationResult:
        return await self._mutator.run(
            "clear_read",
            effect=lambda: self.store.remove_where(lambda n: n.is_read),
            request=self._notifications.clear_read,
            rollback=self._reload,
            failure="Failed to clear read",
            success="Cleared read notifications",
        )


class NotificationFeedFactory:
    """Builds the full notifications page or the compact dropdown."""

    def __init__(
        self,
        notifications: NotificationRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
        settings: FeedSettings,
    ) -> None:
        self._notifications = notifications
        self._mutator = mutator
        self._listener = listener
        self._session = session
        self._settings = settings

    def create(self, compact: bool = False) -> NotificationFeed:
        limit = self._settings.dropdown_size if compact else self._settings.page_size
        return NotificationFeed(
            self._notifications, self._mutator, self._listener, self._session, limit
        )
