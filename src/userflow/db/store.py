"""
userflow.db.store

Generic in-memory keyed store.

Responsibilities:
- Keep items in insertion order.
- Resolve lookups to the first item whose key matches.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from operator import attrgetter
from typing import Generic, TypeVar

from userflow.domain.errors import NotFoundError

T = TypeVar("T")


class InMemoryStore(Generic[T]):
    """
    Append-only list of items. Duplicate keys are kept; `get` returns the earliest one.
    Not thread-safe: callers needing concurrent access must wrap it in their own lock.
    """

    def __init__(self, *, key: Callable[[T], str] = attrgetter("identifier")) -> None:
        self._key = key
        self._items: list[T] = []

    def get(self, key: str) -> T:
        for item in self._items:
            if self._key(item) == key:
                return item
        raise NotFoundError(key)

    def create(self, item: T) -> None:
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))


# --- Module Notes -----------------------------------------------------------
# Uniqueness is not enforced here; a production store would raise ConflictError instead.
