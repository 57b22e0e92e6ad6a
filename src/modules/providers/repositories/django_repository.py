"""Django ORM implementation of the Provider repository."""

from __future__ import annotations

from typing import List

import structlog
from django.db import IntegrityError, transaction

from modules.core.repositories.django_repository import DjangoBaseRepository
from modules.providers.entities import Provider
from modules.providers.exceptions import (
    ProviderAlreadyExists,
    ProviderInUse,
    ProviderNotFound,
)
from modules.providers.models import ProviderRow
from modules.providers.repositories.interfaces import IProviderRepository

logger = structlog.get_logger(__name__)


class ProviderDjangoRepository(DjangoBaseRepository, IProviderRepository):
    """Concrete Provider repository backed by Django ORM."""

    def create(self, entity: Provider) -> None:
        now = self.current_timestamp()
        try:
            with transaction.atomic():
                row = ProviderRow.objects.create(
                    name=entity.name,
                    email=entity.email,
                    phone=entity.phone,
                    address=entity.address,
                    created_at=now,
                    updated_at=now,
                )
        except IntegrityError as exc:
            if self.is_duplicate_entry(exc):
                logger.warning("provider.duplicate_email", email=entity.email)
                raise ProviderAlreadyExists(entity.email) from exc
            raise

        entity.id = row.id
        entity.created_at = now
        entity.updated_at = now
        logger.info("provider.created", provider_id=row.id)

    def get_by_id(self, id: int) -> Provider:
        try:
            row = ProviderRow.objects.get(pk=id)
        except ProviderRow.DoesNotExist as exc:
            raise ProviderNotFound(id) from exc
        return Provider.model_validate(row)

    def get_all(self) -> List[Provider]:
        return [Provider.model_validate(row) for row in ProviderRow.objects.order_by("id")]

    def update(self, entity: Provider) -> None:
        now = self.current_timestamp()
        try:
            with transaction.atomic():
                affected = ProviderRow.objects.filter(pk=entity.id).update(
                    name=entity.name,
                    email=entity.email,
                    phone=entity.phone,
                    address=entity.address,
                    updated_at=now,
                )
        except IntegrityError as exc:
            if self.is_duplicate_entry(exc):
                logger.warning("provider.duplicate_email", email=entity.email)
                raise ProviderAlreadyExists(entity.email) from exc
            raise

        if affected == 0:
            raise ProviderNotFound(entity.id)
        entity.updated_at = now
        logger.info("provider.updated", provider_id=entity.id)

    def delete(self, id: int) -> None:
        try:
            with transaction.atomic():
                deleted, _ = ProviderRow.objects.filter(pk=id).delete()
        except IntegrityError as exc:
            if self.is_foreign_key_violation(exc):
                logger.warning("provider.in_use", provider_id=id)
                raise ProviderInUse(id) from exc
            raise

        if deleted == 0:
            raise ProviderNotFound(id)
        logger.info("provider.deleted", provider_id=id)
