"""In-memory storage backend.

``MemoryStore`` is an owned arena of ``identity -> record`` tables, one
per entity, plus an identity sequence per table.  It is created by the
caller and passed explicitly to every memory repository, so tests and
deployments each get their own isolated instance.

A single ``ReadWriteLock`` guards the whole store: repository writes
(create/update/delete) take it exclusively, reads share it.  This gives
linearizable per-call semantics, but no atomicity across calls.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from datetime import datetime
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from django.utils import timezone
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class ReadWriteLock:
    """Many concurrent readers or one exclusive writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._readers:
                self._cond.wait()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


TABLES = ("products", "users", "providers", "stocks")


class MemoryStore:
    """Keyed tables shared by the memory repositories of one deployment.

    Every table in ``TABLES`` exists from construction, so reads under the
    shared lock never mutate the store.
    """

    def __init__(self) -> None:
        self.lock = ReadWriteLock()
        self._tables: Dict[str, Dict[int, Any]] = {name: {} for name in TABLES}
        self._sequences: Dict[str, int] = {name: 0 for name in TABLES}

    def table(self, name: str) -> Dict[int, Any]:
        """Return the mutable ``identity -> record`` mapping for ``name``.

        Callers must hold ``lock`` (read or write as appropriate).
        """
        return self._tables[name]

    def next_id(self, name: str) -> int:
        self._sequences[name] += 1
        return self._sequences[name]


class MemoryBaseRepository(Generic[T]):
    """Helpers shared by the per-entity memory repositories.

    Records are copied on the way in and on the way out so callers never
    hold a reference into the store.
    """

    table_name: str = ""

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    def current_timestamp(self) -> datetime:
        return timezone.now()

    @property
    def _rows(self) -> Dict[int, T]:
        return self._store.table(self.table_name)

    def _find_by(
        self, field: str, value: Any, exclude_id: Optional[int] = None
    ) -> Optional[T]:
        for row in self._rows.values():
            if row.id != exclude_id and getattr(row, field) == value:
                return row
        return None

    def _sorted(self, predicate: Callable[[T], bool] | None = None) -> List[T]:
        rows = sorted(self._rows.values(), key=lambda row: row.id)
        if predicate is not None:
            rows = [row for row in rows if predicate(row)]
        return rows

    @staticmethod
    def _copy(entity: T) -> T:
        return entity.model_copy(deep=True)

    def _is_referenced(self, table: str, fields: Iterable[str], id: int) -> bool:
        """Whether any row of ``table`` points at ``id`` through one of ``fields``.

        ``fields`` name nested entity attributes (``row.<field>.id``).
        """
        fields = tuple(fields)
        for row in self._store.table(table).values():
            if any(getattr(row, field).id == id for field in fields):
                return True
        return False
