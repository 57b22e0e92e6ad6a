"""Stock service layer (Use Cases).

Orchestrates the Stock aggregate, delegating persistence to the injected
``IStockRepository``.

Rules enforced here:
- A new stock's creator is also its first updater; both timestamps are
  stamped at construction.
- Update and delete first confirm the stock exists (``get_by_id``) and
  only then write.  The check and the write are separate storage calls;
  a concurrent delete in between surfaces as the repository's
  ``StockNotFound``.
- Reference existence is left to the repository (database constraints
  on the relational backend).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.utils import timezone

from modules.products.entities import Product
from modules.providers.entities import Provider
from modules.stocks.entities import Stock
from modules.users.entities import User

if TYPE_CHECKING:
    from modules.stocks.dtos import CreateStockDTO, UpdateStockDTO
    from modules.stocks.repositories.interfaces import IStockRepository

logger = structlog.get_logger(__name__)


class StockService:
    """Application service for Stock use-cases.

    Receives an ``IStockRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IStockRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_stock(self, dto: CreateStockDTO) -> Stock:
        """Register a stock item.

        Returns the write representation (references carry only ids).

        Raises:
            StockAlreadyExists: if the serial is already taken.
            InvalidStockReference: if a reference does not resolve.
        """
        stock = Stock.new(
            product_id=dto.product_id,
            serial=dto.serial,
            batch=dto.batch,
            purchase_date=dto.purchase_date,
            provider_id=dto.provider_id,
            created_by_user_id=dto.created_by_user_id,
        )
        self._repo.create(stock)
        return stock

    def update_stock(self, id: int, dto: UpdateStockDTO) -> Stock:
        """Rewrite a stock item; the creator is carried over unchanged.

        Raises:
            StockNotFound: if the stock does not exist.
            StockAlreadyExists: if the new serial collides.
            InvalidStockReference: if a reference does not resolve.
        """
        existing = self._repo.get_by_id(id)
        stock = Stock(
            id=id,
            product=Product(id=dto.product_id),
            serial=dto.serial,
            created_at=existing.created_at,
            updated_at=timezone.now(),
            created_by_user=User(id=existing.created_by_user.id),
            updated_by_user=User(id=dto.updated_by_user_id),
            batch=dto.batch,
            purchase_date=dto.purchase_date,
            provider=Provider(id=dto.provider_id),
        )
        self._repo.update(stock)
        if existing.product.id != dto.product_id:
            logger.info(
                "stock.product_reassigned",
                stock_id=id,
                from_product_id=existing.product.id,
                to_product_id=dto.product_id,
            )
        return stock

    def delete_stock(self, id: int) -> None:
        """Raises ``StockNotFound`` if the stock does not exist."""
        self._repo.get_by_id(id)
        self._repo.delete(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_stock(self, id: int) -> Stock:
        return self._repo.get_by_id(id)

    def list_stocks(self) -> List[Stock]:
        """Every stock, hydrated, in ascending ID order."""
        return self._repo.get_all()

    def get_stocks_by_product_id(self, product_id: int) -> List[Stock]:
        return self._repo.get_by_product_id(product_id)

    def get_stock_by_serial(self, serial: str) -> Stock:
        return self._repo.get_by_serial(serial)
