"""Stock domain exceptions.

Raised by repositories and the Service Layer.  The API layer (Views)
catches these and translates them into HTTP responses.
"""

from __future__ import annotations

from typing import Optional

from modules.core.exceptions import (
    AlreadyExistsError,
    InvalidReferenceError,
    NotFoundError,
)


class StockAlreadyExists(AlreadyExistsError):
    """Another stock already uses this serial."""

    def __init__(self, serial: str) -> None:
        self.serial = serial
        super().__init__(f"stock with serial {serial} already exists")


class StockNotFound(NotFoundError):
    """No stock matches the lookup key (``stock_id`` or ``serial``)."""

    def __init__(
        self, stock_id: Optional[int] = None, serial: Optional[str] = None
    ) -> None:
        self.stock_id = stock_id
        self.serial = serial
        if serial is not None:
            message = f"stock with serial {serial} not found"
        else:
            message = f"stock with ID {stock_id} not found"
        super().__init__(message)


class InvalidStockReference(InvalidReferenceError):
    """A product, user or provider referenced by the stock does not exist.

    ``reference`` names the offending foreign key when the backend can
    tell (the database constraint error does not say which one failed).
    """

    def __init__(
        self, reference: Optional[str] = None, reference_id: Optional[int] = None
    ) -> None:
        self.reference = reference
        self.reference_id = reference_id
        if reference is not None:
            message = f"stock references missing {reference} {reference_id}"
        else:
            message = "stock references a product, user or provider that does not exist"
        super().__init__(message)
