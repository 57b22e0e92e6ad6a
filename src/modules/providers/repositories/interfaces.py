"""Provider repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.providers.entities import Provider


class IProviderRepository(IRepository["Provider"]):
    """Repository contract for the Provider entity."""
