"""Provider DTOs for the Service Layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator


class CreateProviderDTO(BaseModel):
    """Immutable DTO for provider creation requests.

    ``name`` must not be blank and ``email`` must be a well-formed address.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: EmailStr
    phone: str = ""
    address: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name and email are required fields.")
        return v.strip()


class UpdateProviderDTO(CreateProviderDTO):
    """Immutable DTO for provider update requests (full record)."""
