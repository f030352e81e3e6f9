"""In-Memory Collection: keyed map with auto-increment ids for one entity type.

Invariants:
    - Ids start at 1, strictly increase, and are never reused
    - Every read and read-modify-write happens under the collection's RLock
    - update() only touches fields listed in the record's MUTABLE_FIELDS
    - Missing ids yield None, never an exception

Design Decisions:
    - insert() takes a builder receiving the allocated id: the record is
      constructed complete (frozen dataclass) inside the lock
    - threading.RLock over asyncio.Lock: store calls are sync and may run in
      the threadpool; RLock lets modify() call get() re-entrantly
    - Linear scans for filters: no secondary indexes (collections stay small)
"""

import dataclasses
import itertools
import threading
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Collection(Generic[T]):
    """Thread-safe map of id -> frozen dataclass record."""

    def __init__(self, name: str):
        self.name = name
        self._items: dict[int, T] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def atomic(self) -> threading.RLock:
        """Hold the lock across several operations on this collection."""
        return self._lock

    def insert(self, build: Callable[[int], T]) -> T:
        """Allocate the next id and store the record built for it."""
        with self._lock:
            record_id = next(self._ids)
            record = build(record_id)
            self._items[record_id] = record
            return record

    def get(self, record_id: int) -> T | None:
        with self._lock:
            return self._items.get(record_id)

    def all(self) -> list[T]:
        with self._lock:
            return list(self._items.values())

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """First record (in id order) matching predicate."""
        with self._lock:
            return next((r for r in self._items.values() if predicate(r)), None)

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        with self._lock:
            return [r for r in self._items.values() if predicate(r)]

    def update(self, record_id: int, changes: dict[str, Any]) -> T | None:
        """Shallow-merge changes into the record. None if absent."""
        with self._lock:
            current = self._items.get(record_id)
            if current is None:
                return None
            _check_mutable(current, changes.keys())
            updated = dataclasses.replace(current, **changes)
            self._items[record_id] = updated
            return updated

    def modify(
        self, record_id: int, compute: Callable[[T], dict[str, Any]],
    ) -> T | None:
        """Atomic read-modify-write: changes derived from the current record."""
        with self._lock:
            current = self._items.get(record_id)
            if current is None:
                return None
            return self.update(record_id, compute(current))


def _check_mutable(record: Any, fields: Iterable[str]) -> None:
    allowed = getattr(record, "MUTABLE_FIELDS", frozenset())
    rejected = sorted(set(fields) - allowed)
    if rejected:
        raise ValueError(
            f"{type(record).__name__} fields are not mutable: {', '.join(rejected)}",
        )
