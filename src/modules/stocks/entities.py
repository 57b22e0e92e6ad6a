"""Stock aggregate.

A stock row references four other records: the owning ``Product``, the
``User`` that created it, the ``User`` that last updated it and the
supplying ``Provider``.  The read path returns them fully hydrated; the
write path only looks at their ``id``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from django.utils import timezone
from pydantic import BaseModel, ConfigDict, Field

from modules.products.entities import Product
from modules.providers.entities import Provider
from modules.users.entities import User


class Stock(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    product: Product = Field(default_factory=Product)
    serial: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by_user: User = Field(default_factory=User)
    updated_by_user: User = Field(default_factory=User)
    batch: str = ""
    purchase_date: Optional[date] = None
    provider: Provider = Field(default_factory=Provider)

    @classmethod
    def new(
        cls,
        product_id: int,
        serial: str,
        batch: str,
        purchase_date: Optional[date],
        provider_id: int,
        created_by_user_id: int,
    ) -> Stock:
        """Build an unsaved stock; the creator is also the first updater."""
        now = timezone.now()
        return cls(
            product=Product(id=product_id),
            serial=serial,
            created_at=now,
            updated_at=now,
            created_by_user=User(id=created_by_user_id),
            updated_by_user=User(id=created_by_user_id),
            batch=batch,
            purchase_date=purchase_date,
            provider=Provider(id=provider_id),
        )

    def references(self) -> dict[str, Optional[int]]:
        """Foreign-key scalars persisted for this stock."""
        return {
            "product_id": self.product.id,
            "created_by_user_id": self.created_by_user.id,
            "updated_by_user_id": self.updated_by_user.id,
            "provider_id": self.provider.id,
        }
