"""Local reducer store.

A store holds the best-known snapshot of one server collection, in display
order. Every operation is a synchronous, in-memory update that cannot fail:
unknown ids are ignored and repeated calls are safe. The store is never the
source of truth; a later ``replace_all`` overwrites whatever it holds.
"""

from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from pydantic import BaseModel


E = TypeVar("E", bound=BaseModel)


class EntityStore(Generic[E]):
    """Ordered, id-keyed snapshot of one collection."""

    def __init__(self, items: Optional[list[E]] = None) -> None:
        self._items: list[E] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._items))

    def __contains__(self, entity_id: object) -> bool:
        return self._index(entity_id) is not None

    def snapshot(self) -> list[E]:
        """Copy of the current entries, in order."""
        return list(self._items)

    def ids(self) -> list[str]:
        return [item.id for item in self._items]

    def get(self, entity_id: str) -> Optional[E]:
        index = self._index(entity_id)
        return self._items[index] if index is not None else None

    def replace_all(self, items: list[E]) -> None:
        """Discard everything and install ``items`` as given."""
        self._items = list(items)

    def append_all(self, items: list[E]) -> None:
        """Append a further page; entries already present are patched in place."""
        for item in items:
            index = self._index(item.id)
            if index is None:
                self._items.append(item)
            else:
                self._items[index] = self._merge(self._items[index], _fields(item))

    def insert_front(self, item: E) -> None:
        """Prepend ``item`` so the newest entry shows first.

        An entry with the same id is patched in place instead, so a push
        event and an optimistic insert never produce duplicates.
        """
        index = self._index(item.id)
        if index is None:
            self._items.insert(0, item)
        else:
            self._items[index] = self._merge(self._items[index], _fields(item))

    def patch(self, entity_id: str, **fields: Any) -> None:
        """Merge ``fields`` into the entry with ``entity_id``; no-op if absent."""
        index = self._index(entity_id)
        if index is not None:
            self._items[index] = self._merge(self._items[index], fields)

    def update(self, entity_id: str, change: Callable[[E], dict[str, Any]]) -> None:
        """Patch with fields computed from the current entry; no-op if absent."""
        index = self._index(entity_id)
        if index is not None:
            current = self._items[index]
            self._items[index] = self._merge(current, change(current))

    def map_all(self, **fields: Any) -> None:
        """Patch every entry with the same fields."""
        self._items = [self._merge(item, fields) for item in self._items]

    def remove(self, entity_id: str) -> None:
        """Drop the entry with ``entity_id``; no-op if absent."""
        self._items = [item for item in self._items if item.id != entity_id]

    def remove_where(self, predicate: Callable[[E], bool]) -> None:
        self._items = [item for item in self._items if not predicate(item)]

    def _merge(self, current: E, fields: dict[str, Any]) -> E:
        return current.model_copy(update=fields)

    def _index(self, entity_id: object) -> Optional[int]:
        return next(
            (i for i, item in enumerate(self._items) if item.id == entity_id), None
        )


def _fields(item: BaseModel) -> dict[str, Any]:
    """Field values of ``item`` without dumping nested models to dicts."""
    return {name: getattr(item, name) for name in type(item).model_fields}
