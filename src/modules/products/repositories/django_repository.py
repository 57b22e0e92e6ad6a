"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.  Duplicate
codes are detected by the database's unique index and translated into
``ProductAlreadyExists``; zero affected rows become ``ProductNotFound``.
"""

from __future__ import annotations

from typing import List

import structlog
from django.db import IntegrityError, transaction

from modules.core.repositories.django_repository import DjangoBaseRepository
from modules.products.entities import Product
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductInUse,
    ProductNotFound,
)
from modules.products.models import ProductRow
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(DjangoBaseRepository, IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def create(self, entity: Product) -> None:
        now = self.current_timestamp()
        try:
            with transaction.atomic():
                row = ProductRow.objects.create(
                    name=entity.name,
                    code=entity.code,
                    image_url=entity.image_url,
                    created_at=now,
                    updated_at=now,
                )
        except IntegrityError as exc:
            if self.is_duplicate_entry(exc):
                logger.warning("product.duplicate_code", code=entity.code)
                raise ProductAlreadyExists(entity.code) from exc
            raise

        entity.id = row.id
        entity.created_at = now
        entity.updated_at = now
        logger.info("product.created", product_id=row.id, code=entity.code)

    def get_by_id(self, id: int) -> Product:
        try:
            row = ProductRow.objects.get(pk=id)
        except ProductRow.DoesNotExist as exc:
            raise ProductNotFound(id) from exc
        return Product.model_validate(row)

    def get_all(self) -> List[Product]:
        return [Product.model_validate(row) for row in ProductRow.objects.order_by("id")]

    def update(self, entity: Product) -> None:
        now = self.current_timestamp()
        try:
            with transaction.atomic():
                affected = ProductRow.objects.filter(pk=entity.id).update(
                    name=entity.name,
                    code=entity.code,
                    image_url=entity.image_url,
                    updated_at=now,
                )
        except IntegrityError as exc:
            if self.is_duplicate_entry(exc):
                logger.warning("product.duplicate_code", code=entity.code)
                raise ProductAlreadyExists(entity.code) from exc
            raise

        if affected == 0:
            raise ProductNotFound(entity.id)
        entity.updated_at = now
        logger.info("product.updated", product_id=entity.id)

    def delete(self, id: int) -> None:
        try:
            with transaction.atomic():
                deleted, _ = ProductRow.objects.filter(pk=id).delete()
        except IntegrityError as exc:
            if self.is_foreign_key_violation(exc):
                logger.warning("product.in_use", product_id=id)
                raise ProductInUse(id) from exc
            raise

        if deleted == 0:
            raise ProductNotFound(id)
        logger.info("product.deleted", product_id=id)
