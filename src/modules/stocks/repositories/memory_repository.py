"""In-memory implementation of the Stock repository.

Stored rows keep only the reference ids; reads hydrate the product,
users and provider from their tables in the same ``MemoryStore``.
Writes check that every reference resolves, mirroring the database's
foreign-key constraints.
"""

from __future__ import annotations

from typing import List

import structlog

from modules.core.repositories.memory import MemoryBaseRepository
from modules.products.entities import Product
from modules.providers.entities import Provider
from modules.stocks.entities import Stock
from modules.stocks.exceptions import (
    InvalidStockReference,
    StockAlreadyExists,
    StockNotFound,
)
from modules.stocks.repositories.interfaces import IStockRepository
from modules.users.entities import User

logger = structlog.get_logger(__name__)

# attribute on Stock -> (store table, entity type)
REFERENCES = {
    "product": ("products", Product),
    "created_by_user": ("users", User),
    "updated_by_user": ("users", User),
    "provider": ("providers", Provider),
}


class StockMemoryRepository(MemoryBaseRepository[Stock], IStockRepository):
    """Stock repository over the ``stocks`` table of a ``MemoryStore``."""

    table_name = "stocks"

    def _check_references(self, stock: Stock) -> None:
        for attr, (table, _) in REFERENCES.items():
            ref_id = getattr(stock, attr).id
            if ref_id not in self._store.table(table):
                logger.warning(
                    "stock.invalid_reference", reference=attr, reference_id=ref_id
                )
                raise InvalidStockReference(attr, ref_id)

    def _check_serial(self, stock: Stock, exclude_id: int | None = None) -> None:
        if self._find_by("serial", stock.serial, exclude_id=exclude_id) is not None:
            logger.warning("stock.duplicate_serial", serial=stock.serial)
            raise StockAlreadyExists(stock.serial)

    def _dehydrate(self, stock: Stock) -> Stock:
        update = {
            attr: model(id=getattr(stock, attr).id)
            for attr, (_, model) in REFERENCES.items()
        }
        return self._copy(stock).model_copy(update=update)

    def _hydrate(self, row: Stock) -> Stock:
        update = {}
        for attr, (table, model) in REFERENCES.items():
            ref_id = getattr(row, attr).id
            ref = self._store.table(table).get(ref_id)
            if ref is None:
                update[attr] = model(id=ref_id)
            else:
                update[attr] = ref.model_copy(deep=True)
        return self._copy(row).model_copy(update=update)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, entity: Stock) -> None:
        with self._store.lock.write():
            self._check_serial(entity)
            self._check_references(entity)
            now = self.current_timestamp()
            entity.id = self._store.next_id(self.table_name)
            entity.created_at = now
            entity.updated_at = now
            self._rows[entity.id] = self._dehydrate(entity)
        logger.info("stock.created", stock_id=entity.id, serial=entity.serial)

    def update(self, entity: Stock) -> None:
        with self._store.lock.write():
            stored = self._rows.get(entity.id)
            if stored is None:
                raise StockNotFound(stock_id=entity.id)
            self._check_serial(entity, exclude_id=entity.id)
            # The creator is immutable; only the updater reference moves.
            candidate = entity.model_copy(
                update={"created_by_user": stored.created_by_user}
            )
            self._check_references(candidate)
            entity.updated_at = self.current_timestamp()
            self._rows[entity.id] = self._dehydrate(candidate).model_copy(
                update={"created_at": stored.created_at, "updated_at": entity.updated_at}
            )
        logger.info("stock.updated", stock_id=entity.id)

    def delete(self, id: int) -> None:
        with self._store.lock.write():
            if self._rows.pop(id, None) is None:
                raise StockNotFound(stock_id=id)
        logger.info("stock.deleted", stock_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Stock:
        with self._store.lock.read():
            row = self._rows.get(id)
            if row is None:
                raise StockNotFound(stock_id=id)
            return self._hydrate(row)

    def get_by_serial(self, serial: str) -> Stock:
        with self._store.lock.read():
            row = self._find_by("serial", serial)
            if row is None:
                raise StockNotFound(serial=serial)
            return self._hydrate(row)

    def get_all(self) -> List[Stock]:
        with self._store.lock.read():
            return [self._hydrate(row) for row in self._sorted()]

    def get_by_product_id(self, product_id: int) -> List[Stock]:
        with self._store.lock.read():
            rows = self._sorted(lambda row: row.product.id == product_id)
            return [self._hydrate(row) for row in rows]
