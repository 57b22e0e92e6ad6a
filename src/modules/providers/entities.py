"""Provider domain entity."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from django.utils import timezone
from pydantic import BaseModel, ConfigDict


class Provider(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def new(cls, name: str, email: str, phone: str = "", address: str = "") -> Provider:
        now = timezone.now()
        return cls(
            name=name,
            email=email,
            phone=phone,
            address=address,
            created_at=now,
            updated_at=now,
        )
