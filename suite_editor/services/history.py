"""Bounded most-recent-first history lists persisted in the preferences store."""

from __future__ import annotations

from typing import Protocol

from suite_editor.utils.config import HISTORY_GROUP


class ListStore(Protocol):
    def get_list(self, key: str) -> list[str]: ...

    def set_list(self, key: str, values: list[str]) -> None: ...


class StoredHistory:
    """Recently used values, newest first.

    Re-adding a value moves it to the front. ``max_size=None`` keeps every
    value.
    """

    def __init__(self, name: str, max_size: int | None = None, store: ListStore | None = None) -> None:
        if max_size is not None and max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.name = name
        self.max_size = max_size
        self._store = store
        items = store.get_list(self.key) if store is not None else []
        self._items: list[str] = self._truncate([str(i) for i in items if i])

    @property
    def key(self) -> str:
        return f"{HISTORY_GROUP}/{self.name}"

    def _truncate(self, items: list[str]) -> list[str]:
        if self.max_size is not None and len(items) > self.max_size:
            return items[:self.max_size]
        return items

    def add(self, value: str) -> None:
        """Push *value* to the front. Blank values are ignored."""
        if not value:
            return
        items = [i for i in self._items if i != value]
        items.insert(0, value)
        self._items = self._truncate(items)
        self._save()

    def remove(self, value: str) -> None:
        if value in self._items:
            self._items.remove(value)
            self._save()

    def clear(self) -> None:
        self._items = []
        self._save()

    def items(self) -> list[str]:
        return list(self._items)

    def _save(self) -> None:
        if self._store is not None:
            self._store.set_list(self.key, list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items
