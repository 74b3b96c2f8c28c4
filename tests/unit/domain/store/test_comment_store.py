"""Unit tests for CommentStore reply operations."""

from club.domain.store import CommentStore
from tests.conftest import make_comment


def _thread() -> CommentStore:
    replies = [
        make_comment("r1", author_id="u2", parent_id="c1", likes=["u3"]),
        make_comment("r2", author_id="u3", parent_id="c1"),
        make_comment("r3", author_id="u2", parent_id="c1"),
    ]
    return CommentStore(
        [
            make_comment("c1", likes=["u4"], replies=replies),
            make_comment("c2"),
        ]
    )


class TestNestedReplyIsolation:
    """Reply operations must leave siblings and the parent alone."""

    def test_map_nested_touches_only_the_reply(self):
        """Editing a reply should not alter siblings or parent content/likes."""
        store = _thread()
        before = store.get("c1")

        store.map_nested("c1", "r2", content="edited", is_edited=True)

        after = store.get("c1")
        assert after.content == before.content
        assert after.likes == before.likes
        assert after.find_reply("r1") == before.find_reply("r1")
        assert after.find_reply("r3") == before.find_reply("r3")
        assert after.find_reply("r2").content == "edited"
        assert after.find_reply("r2").is_edited is True

    def test_remove_nested_touches_only_the_reply(self):
        """Deleting a reply should keep sibling order and parent fields."""
        store = _thread()
        before = store.get("c1")

        store.remove_nested("c1", "r2")

        after = store.get("c1")
        assert [r.id for r in after.replies] == ["r1", "r3"]
        assert after.find_reply("r1") == before.find_reply("r1")
        assert after.content == before.content
        assert after.likes == before.likes

    def test_other_comments_untouched(self):
        """Reply operations should not alter other top-level comments."""
        store = _thread()
        other = store.get("c2")

        store.map_nested("c1", "r1", content="edited")
        store.remove_nested("c1", "r3")

        assert store.get("c2") == other

    def test_unknown_parent_or_child_is_noop(self):
        """Should not raise for absent ids."""
        store = _thread()
        before = store.snapshot()

        store.map_nested("missing", "r1", content="x")
        store.map_nested("c1", "missing", content="x")
        store.remove_nested("missing", "r1")
        store.remove_nested("c1", "missing")

        assert store.snapshot() == before


class TestAppendNested:
    """Tests for adding replies."""

    def test_appends_reply_at_the_end(self):
        """Should add the reply as the newest of its parent."""
        store = _thread()

        store.append_nested("c1", make_comment("r4", parent_id="c1"))

        assert [r.id for r in store.get("c1").replies] == ["r1", "r2", "r3", "r4"]

    def test_known_reply_is_not_duplicated(self):
        """Appending a reply id already present should merge it."""
        store = _thread()

        store.append_nested("c1", make_comment("r2", parent_id="c1", content="server copy"))

        replies = store.get("c1").replies
        assert [r.id for r in replies] == ["r1", "r2", "r3"]
        assert replies[1].content == "server copy"

    def test_count_includes_replies(self):
        """Should count comments and replies together."""
        assert _thread().count() == 5
