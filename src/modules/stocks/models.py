"""Stock table.

Four foreign keys (``product_id``, ``created_by_user_id``,
``updated_by_user_id``, ``provider_id``) are enforced by the database.
``DO_NOTHING`` keeps Django from emulating cascades in Python: deleting a
referenced product, user or provider is rejected by the constraint.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class StockRow(TimestampedModel):
    """Persistence model for ``modules.stocks.entities.Stock``."""

    product = models.ForeignKey(
        "products.ProductRow",
        on_delete=models.DO_NOTHING,
        related_name="stocks",
    )
    serial = models.CharField(max_length=128, unique=True)
    created_by_user = models.ForeignKey(
        "users.UserRow",
        on_delete=models.DO_NOTHING,
        related_name="created_stocks",
    )
    updated_by_user = models.ForeignKey(
        "users.UserRow",
        on_delete=models.DO_NOTHING,
        related_name="updated_stocks",
    )
    batch = models.CharField(max_length=128, blank=True, default="")
    purchase_date = models.DateField(null=True, blank=True)
    provider = models.ForeignKey(
        "providers.ProviderRow",
        on_delete=models.DO_NOTHING,
        related_name="stocks",
    )

    class Meta:
        db_table = "stocks"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.serial
