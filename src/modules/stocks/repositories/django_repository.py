"""Django ORM implementation of the Stock repository.

Reads join ``stocks`` with ``products``, ``users`` (twice: creator and
updater) and ``providers`` in a single query via ``select_related`` and
rebuild the nested aggregate from the joined row.  Writes store only the
foreign-key columns.

Storage signals are translated as:

- duplicate ``serial`` -> ``StockAlreadyExists``
- dangling reference -> ``InvalidStockReference``
- zero affected rows / ``DoesNotExist`` -> ``StockNotFound``

anything else propagates unchanged.
"""

from __future__ import annotations

from typing import List

import structlog
from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from modules.core.repositories.django_repository import DjangoBaseRepository
from modules.stocks.entities import Stock
from modules.stocks.exceptions import (
    InvalidStockReference,
    StockAlreadyExists,
    StockNotFound,
)
from modules.stocks.models import StockRow
from modules.stocks.repositories.interfaces import IStockRepository

logger = structlog.get_logger(__name__)

JOINED_RELATIONS = ("product", "created_by_user", "updated_by_user", "provider")


class StockDjangoRepository(DjangoBaseRepository, IStockRepository):
    """Concrete Stock repository backed by Django ORM."""

    def _joined(self) -> QuerySet[StockRow]:
        return StockRow.objects.select_related(*JOINED_RELATIONS)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, entity: Stock) -> None:
        now = self.current_timestamp()
        try:
            with transaction.atomic():
                row = StockRow.objects.create(
                    serial=entity.serial,
                    batch=entity.batch,
                    purchase_date=entity.purchase_date,
                    created_at=now,
                    updated_at=now,
                    **entity.references(),
                )
        except IntegrityError as exc:
            if self.is_duplicate_entry(exc):
                logger.warning("stock.duplicate_serial", serial=entity.serial)
                raise StockAlreadyExists(entity.serial) from exc
            if self.is_foreign_key_violation(exc):
                logger.warning("stock.invalid_reference", **entity.references())
                raise InvalidStockReference() from exc
            raise

        entity.id = row.id
        entity.created_at = now
        entity.updated_at = now
        logger.info("stock.created", stock_id=row.id, serial=entity.serial)

    def update(self, entity: Stock) -> None:
        now = self.current_timestamp()
        try:
            with transaction.atomic():
                affected = StockRow.objects.filter(pk=entity.id).update(
                    product_id=entity.product.id,
                    serial=entity.serial,
                    updated_at=now,
                    updated_by_user_id=entity.updated_by_user.id,
                    batch=entity.batch,
                    purchase_date=entity.purchase_date,
                    provider_id=entity.provider.id,
                )
        except IntegrityError as exc:
            if self.is_duplicate_entry(exc):
                logger.warning("stock.duplicate_serial", serial=entity.serial)
                raise StockAlreadyExists(entity.serial) from exc
            if self.is_foreign_key_violation(exc):
                logger.warning("stock.invalid_reference", **entity.references())
                raise InvalidStockReference() from exc
            raise

        if affected == 0:
            raise StockNotFound(stock_id=entity.id)
        entity.updated_at = now
        logger.info("stock.updated", stock_id=entity.id)

    def delete(self, id: int) -> None:
        deleted, _ = StockRow.objects.filter(pk=id).delete()
        if deleted == 0:
            raise StockNotFound(stock_id=id)
        logger.info("stock.deleted", stock_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Stock:
        try:
            row = self._joined().get(pk=id)
        except StockRow.DoesNotExist as exc:
            raise StockNotFound(stock_id=id) from exc
        return Stock.model_validate(row)

    def get_by_serial(self, serial: str) -> Stock:
        try:
            row = self._joined().get(serial=serial)
        except StockRow.DoesNotExist as exc:
            raise StockNotFound(serial=serial) from exc
        return Stock.model_validate(row)

    def get_all(self) -> List[Stock]:
        return [Stock.model_validate(row) for row in self._joined().order_by("id")]

    def get_by_product_id(self, product_id: int) -> List[Stock]:
        rows = self._joined().filter(product_id=product_id).order_by("id")
        return [Stock.model_validate(row) for row in rows]
