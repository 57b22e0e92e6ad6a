"""Product repository interface.

``IRepository[Product]`` without additions: products are a single-table
entity with one uniqueness rule (``code``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.entities import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""
