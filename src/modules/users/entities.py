"""User domain entity."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from django.utils import timezone
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Inventory operator.

    ``password`` is opaque and excluded from every dump; it only travels
    between the service and the repository.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str = ""
    email: str = ""
    role: str = ""
    password: str = Field(default="", exclude=True, repr=False)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def new(cls, name: str, email: str, role: str, password: str) -> User:
        now = timezone.now()
        return cls(
            name=name,
            email=email,
            role=role,
            password=password,
            created_at=now,
            updated_at=now,
        )
