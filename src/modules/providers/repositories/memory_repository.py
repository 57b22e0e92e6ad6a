"""In-memory implementation of the Provider repository."""

from __future__ import annotations

from typing import List

import structlog

from modules.core.repositories.memory import MemoryBaseRepository
from modules.providers.entities import Provider
from modules.providers.exceptions import (
    ProviderAlreadyExists,
    ProviderInUse,
    ProviderNotFound,
)
from modules.providers.repositories.interfaces import IProviderRepository

logger = structlog.get_logger(__name__)


class ProviderMemoryRepository(MemoryBaseRepository[Provider], IProviderRepository):
    """Provider repository over the ``providers`` table of a ``MemoryStore``."""

    table_name = "providers"

    def create(self, entity: Provider) -> None:
        with self._store.lock.write():
            if self._find_by("email", entity.email) is not None:
                raise ProviderAlreadyExists(entity.email)
            now = self.current_timestamp()
            entity.id = self._store.next_id(self.table_name)
            entity.created_at = now
            entity.updated_at = now
            self._rows[entity.id] = self._copy(entity)
        logger.info("provider.created", provider_id=entity.id)

    def get_by_id(self, id: int) -> Provider:
        with self._store.lock.read():
            row = self._rows.get(id)
            if row is None:
                raise ProviderNotFound(id)
            return self._copy(row)

    def get_all(self) -> List[Provider]:
        with self._store.lock.read():
            return [self._copy(row) for row in self._sorted()]

    def update(self, entity: Provider) -> None:
        with self._store.lock.write():
            stored = self._rows.get(entity.id)
            if stored is None:
                raise ProviderNotFound(entity.id)
            if self._find_by("email", entity.email, exclude_id=entity.id) is not None:
                raise ProviderAlreadyExists(entity.email)
            entity.updated_at = self.current_timestamp()
            self._rows[entity.id] = self._copy(entity).model_copy(
                update={"created_at": stored.created_at}
            )
        logger.info("provider.updated", provider_id=entity.id)

    def delete(self, id: int) -> None:
        with self._store.lock.write():
            if id not in self._rows:
                raise ProviderNotFound(id)
            if self._is_referenced("stocks", ("provider",), id):
                raise ProviderInUse(id)
            del self._rows[id]
        logger.info("provider.deleted", provider_id=id)
