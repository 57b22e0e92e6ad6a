"""In-memory implementation of the Product repository."""

from __future__ import annotations

from typing import List

import structlog

from modules.core.repositories.memory import MemoryBaseRepository
from modules.products.entities import Product
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductInUse,
    ProductNotFound,
)
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductMemoryRepository(MemoryBaseRepository[Product], IProductRepository):
    """Product repository over the ``products`` table of a ``MemoryStore``."""

    table_name = "products"

    def create(self, entity: Product) -> None:
        with self._store.lock.write():
            if self._find_by("code", entity.code) is not None:
                raise ProductAlreadyExists(entity.code)
            now = self.current_timestamp()
            entity.id = self._store.next_id(self.table_name)
            entity.created_at = now
            entity.updated_at = now
            self._rows[entity.id] = self._copy(entity)
        logger.info("product.created", product_id=entity.id, code=entity.code)

    def get_by_id(self, id: int) -> Product:
        with self._store.lock.read():
            row = self._rows.get(id)
            if row is None:
                raise ProductNotFound(id)
            return self._copy(row)

    def get_all(self) -> List[Product]:
        with self._store.lock.read():
            return [self._copy(row) for row in self._sorted()]

    def update(self, entity: Product) -> None:
        with self._store.lock.write():
            stored = self._rows.get(entity.id)
            if stored is None:
                raise ProductNotFound(entity.id)
            if self._find_by("code", entity.code, exclude_id=entity.id) is not None:
                raise ProductAlreadyExists(entity.code)
            entity.updated_at = self.current_timestamp()
            self._rows[entity.id] = self._copy(entity).model_copy(
                update={"created_at": stored.created_at}
            )
        logger.info("product.updated", product_id=entity.id)

    def delete(self, id: int) -> None:
        with self._store.lock.write():
            if id not in self._rows:
                raise ProductNotFound(id)
            if self._is_referenced("stocks", ("product",), id):
                raise ProductInUse(id)
            del self._rows[id]
        logger.info("product.deleted", product_id=id)
