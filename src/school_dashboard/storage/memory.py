from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class MemoryTable(Generic[T]):
    """Process-local table keyed by auto-increment integer ids.

    Ids start at 1 and are never reused, even after a delete. Every public
    method takes the table lock; callers that need several steps to be atomic
    (find-then-write) wrap them in :meth:`locked`.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["MemoryTable[T]"]:
        with self._lock:
            yield self

    def insert(self, build: Callable[[int], T]) -> T:
        """Allocate the next id, build the row with it and store it."""
        with self._lock:
            row_id = self._next_id
            self._next_id += 1
            row = build(row_id)
            self._rows[row_id] = row
            return row

    def put(self, row_id: int, row: T) -> None:
        with self._lock:
            if row_id not in self._rows:
                raise KeyError(f"{self.name}: cannot overwrite missing row {row_id}")
            self._rows[row_id] = row

    def get(self, row_id: int) -> Optional[T]:
        with self._lock:
            return self._rows.get(int(row_id))

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        with self._lock:
            for row in self._rows.values():
                if predicate(row):
                    return row
            return None

    def all(self) -> List[T]:
        """Snapshot of all rows in insertion order."""
        with self._lock:
            return list(self._rows.values())

    def remove(self, row_id: int) -> bool:
        with self._lock:
            return self._rows.pop(int(row_id), None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
