"""Base abstract model shared by the inventory tables.

Provides ``TimestampedModel``: integer surrogate key plus
``created_at`` / ``updated_at`` columns.

Timestamps are plain columns (no ``auto_now``): the repositories stamp
the instant they persist and write it back onto the domain record, so
the same value is observable through every backend.
"""

from __future__ import annotations

from django.db import models


class TimestampedModel(models.Model):
    """Abstract base with BigAutoField PK and timestamp bookkeeping."""

    id = models.BigAutoField(primary_key=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        abstract = True
