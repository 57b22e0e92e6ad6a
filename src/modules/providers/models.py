"""Provider (supplier) table."""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class ProviderRow(TimestampedModel):
    """Persistence model for ``modules.providers.entities.Provider``."""

    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254, unique=True)
    phone = models.CharField(max_length=32, blank=True, default="")
    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "providers"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name
