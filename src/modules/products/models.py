"""Product table.

``code`` is globally unique: ``unique=True`` creates the UNIQUE INDEX the
repositories rely on to detect duplicates.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class ProductRow(TimestampedModel):
    """Persistence model for ``modules.products.entities.Product``."""

    name = models.CharField(max_length=255)
    code = models.CharField(max_length=64, unique=True)
    image_url = models.CharField(max_length=2048, blank=True, default="")

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"
