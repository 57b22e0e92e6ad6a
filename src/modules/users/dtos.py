"""User DTOs for the Service Layer.

- ``CreateUserDTO``: input for user registration.
- ``UpdateUserDTO``: input for user updates; an empty ``password``
  keeps the stored one.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator


class CreateUserDTO(BaseModel):
    """Immutable DTO for user creation requests.

    Validates:
    - ``name`` is not blank.
    - ``email`` is a well-formed address (Pydantic ``EmailStr``).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: EmailStr
    role: str = ""
    password: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name and email are required fields.")
        return v.strip()


class UpdateUserDTO(CreateUserDTO):
    """Immutable DTO for user update requests."""
