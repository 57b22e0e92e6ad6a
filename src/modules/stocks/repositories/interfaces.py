"""Stock repository interface.

Extends ``IRepository[Stock]`` with the two secondary lookups.  Every
read returns a fully hydrated aggregate (product, creator, updater and
provider with their own fields); ``create`` and ``update`` persist only
the four reference ids.  ``update`` never rewrites the creator.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.stocks.entities import Stock


class IStockRepository(IRepository["Stock"]):
    """Repository contract for the Stock aggregate."""

    @abstractmethod
    def get_by_product_id(self, product_id: int) -> List[Stock]:
        """Stocks of one product in ascending ID order (possibly empty)."""

    @abstractmethod
    def get_by_serial(self, serial: str) -> Stock:
        """Retrieve a stock by serial; raises ``StockNotFound`` when absent."""
