"""Unit tests for NotificationStore read-once semantics."""

from datetime import datetime, timezone

from club.domain.store import NotificationStore
from tests.conftest import make_notification


class TestReadOnce:
    """Once read, a notification stays read until removed or replaced."""

    def test_patch_cannot_unread(self):
        """Should ignore is_read=False on a read notification."""
        store = NotificationStore([make_notification("n1", is_read=True)])

        store.patch("n1", is_read=False, title="Updated")

        notification = store.get("n1")
        assert notification.is_read is True
        assert notification.title == "Updated"

    def test_insert_front_cannot_unread(self):
        """A pushed unread copy of a read notification should stay read."""
        read_at = datetime(2025, 1, 2, tzinfo=timezone.utc)
        store = NotificationStore([make_notification("n1", is_read=True, read_at=read_at)])

        store.insert_front(make_notification("n1", is_read=False))

        assert store.ids() == ["n1"]
        assert store.get("n1").is_read is True
        assert store.get("n1").read_at == read_at

    def test_map_all_cannot_unread(self):
        """Bulk patches should not flip read notifications back."""
        store = NotificationStore(
            [make_notification("n1", is_read=True), make_notification("n2")]
        )

        store.map_all(is_read=False)

        assert [n.is_read for n in store] == [True, False]

    def test_unread_can_become_read(self):
        """The false to true transition should go through."""
        store = NotificationStore([make_notification("n1")])

        store.patch("n1", is_read=True)

        assert store.get("n1").is_read is True

    def test_replace_all_installs_server_truth(self):
        """A full fetch is authoritative."""
        store = NotificationStore([make_notification("n1", is_read=True)])

        store.replace_all([make_notification("n1", is_read=False)])

        assert store.get("n1").is_read is False

    def test_unread_count(self):
        """Should count unread entries only."""
        store = NotificationStore(
            [
                make_notification("n1"),
                make_notification("n2", is_read=True),
                make_notification("n3"),
            ]
        )

        assert store.unread_count == 2
