"""Stock DTOs for the Service Layer.

- ``CreateStockDTO``: product, serial, provider and creator are required.
- ``UpdateStockDTO``: product, serial, provider and updater are required;
  the creator of a stock never changes.

``purchase_date`` is optional and, when given, must be ``YYYY-MM-DD``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.core.dtos import EntityId

PURCHASE_DATE_FORMAT = "%Y-%m-%d"


def parse_purchase_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError("Invalid purchase date format")
    try:
        return datetime.strptime(value, PURCHASE_DATE_FORMAT).date()
    except ValueError:
        raise ValueError("Invalid purchase date format") from None


class _StockFieldsDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: EntityId
    serial: str
    batch: str = ""
    purchase_date: Optional[date] = None
    provider_id: EntityId

    @field_validator("serial")
    @classmethod
    def serial_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Serial is required.")
        return v.strip()

    @field_validator("purchase_date", mode="before")
    @classmethod
    def purchase_date_format(cls, v: Any) -> Optional[date]:
        return parse_purchase_date(v)


class CreateStockDTO(_StockFieldsDTO):
    """Immutable DTO for stock creation requests."""

    created_by_user_id: EntityId


class UpdateStockDTO(_StockFieldsDTO):
    """Immutable DTO for stock update requests (full record)."""

    updated_by_user_id: EntityId
