"""Shared helpers for the Django ORM repositories.

Every relational repository issues single, unbatched statements through
Django's database layer and relies on the database for uniqueness and
referential integrity.  Storage signals are recognised as follows:

- "no rows": ``Model.DoesNotExist`` from ``QuerySet.get`` on reads, a zero
  affected-row count on ``update()`` / ``delete()``.
- "duplicate key": SQLite ``UNIQUE constraint failed`` / MySQL error 1062.
- "foreign key": SQLite ``FOREIGN KEY constraint failed`` /
  MySQL errors 1451 and 1452.

Any other ``IntegrityError`` is ``StorageSignal.OTHER`` and must be
re-raised unchanged.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Optional

from django.db import IntegrityError, connection
from django.utils import timezone

MYSQL_DUPLICATE_ENTRY = 1062
MYSQL_ROW_IS_REFERENCED = 1451
MYSQL_NO_REFERENCED_ROW = 1452

SQLITE_DUPLICATE_ENTRY = "UNIQUE constraint failed"
SQLITE_FOREIGN_KEY = "FOREIGN KEY constraint failed"


class StorageSignal(StrEnum):
    """Classification of an ``IntegrityError``."""

    DUPLICATE_KEY = "duplicate_key"
    FOREIGN_KEY = "foreign_key"
    OTHER = "other"


def _driver_error_code(exc: BaseException) -> Optional[int]:
    """Numeric driver error code (MySQL), or ``None`` when absent.

    Django re-raises driver errors with the original ``args``, so the code
    is available on the wrapper as well as on ``__cause__``.
    """
    for candidate in (exc, exc.__cause__):
        args = getattr(candidate, "args", ())
        if args and isinstance(args[0], int):
            return args[0]
    return None


def classify_integrity_error(exc: BaseException, vendor: str) -> StorageSignal:
    """Map ``exc`` raised by the ``vendor`` backend to a ``StorageSignal``."""
    if not isinstance(exc, IntegrityError):
        return StorageSignal.OTHER

    if vendor == "mysql":
        code = _driver_error_code(exc)
        if code == MYSQL_DUPLICATE_ENTRY:
            return StorageSignal.DUPLICATE_KEY
        if code in (MYSQL_ROW_IS_REFERENCED, MYSQL_NO_REFERENCED_ROW):
            return StorageSignal.FOREIGN_KEY
        return StorageSignal.OTHER

    message = str(exc)
    if SQLITE_DUPLICATE_ENTRY in message:
        return StorageSignal.DUPLICATE_KEY
    if SQLITE_FOREIGN_KEY in message:
        return StorageSignal.FOREIGN_KEY
    return StorageSignal.OTHER


class DjangoBaseRepository:
    """Mixin with timestamp and error-signal helpers for ORM repositories."""

    def current_timestamp(self) -> datetime:
        return timezone.now()

    @property
    def vendor(self) -> str:
        return connection.vendor

    def is_duplicate_entry(self, exc: BaseException) -> bool:
        return classify_integrity_error(exc, self.vendor) is StorageSignal.DUPLICATE_KEY

    def is_foreign_key_violation(self, exc: BaseException) -> bool:
        return classify_integrity_error(exc, self.vendor) is StorageSignal.FOREIGN_KEY
