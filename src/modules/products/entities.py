"""Product domain entity.

Plain record shared by every repository backend.  Stock aggregates embed
a ``Product``; on the write path only ``id`` is meaningful.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from django.utils import timezone
from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str = ""
    code: str = ""
    image_url: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def new(cls, name: str, code: str, image_url: str = "") -> Product:
        """Build an unsaved product with both timestamps set to now."""
        now = timezone.now()
        return cls(
            name=name,
            code=code,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
