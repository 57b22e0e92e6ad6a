"""User table. ``email`` carries the unique index."""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class UserRow(TimestampedModel):
    """Persistence model for ``modules.users.entities.User``."""

    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254, unique=True)
    role = models.CharField(max_length=64, blank=True, default="")
    password = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "users"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.email
