"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  These are
the contracts between the API layer (Views) and the Service layer.
DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full-record product updates.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    ``name`` and ``code`` are required and must not be blank.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    image_url: str = ""

    @field_validator("name", "code")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name and code are required fields.")
        return v.strip()


class UpdateProductDTO(CreateProductDTO):
    """Immutable DTO for product update requests (full record)."""
