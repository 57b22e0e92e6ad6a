"""Repository wiring for the HTTP layer.

Views ask the container for repositories instead of instantiating a
concrete backend themselves, so the backend variant is a deployment
choice (``settings.REPOSITORY_BACKEND``):

- ``"django"``: Django ORM repositories over ``DATABASES["default"]``
  (SQLite or MySQL depending on ``DATABASE_URL``).
- ``"memory"``: memory repositories sharing one ``MemoryStore`` owned by
  the container.

Services never see the container; they receive a repository instance.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.conf import settings

from modules.core.repositories.memory import MemoryStore
from modules.products.repositories import (
    IProductRepository,
    ProductDjangoRepository,
    ProductMemoryRepository,
)
from modules.providers.repositories import (
    IProviderRepository,
    ProviderDjangoRepository,
    ProviderMemoryRepository,
)
from modules.stocks.repositories import (
    IStockRepository,
    StockDjangoRepository,
    StockMemoryRepository,
)
from modules.users.repositories import (
    IUserRepository,
    UserDjangoRepository,
    UserMemoryRepository,
)

logger = structlog.get_logger(__name__)

BACKEND_DJANGO = "django"
BACKEND_MEMORY = "memory"


class UnknownRepositoryBackend(ValueError):
    """``REPOSITORY_BACKEND`` names no known backend variant."""


class RepositoryContainer:
    """Builds repositories for the configured backend variant."""

    def __init__(self, backend: Optional[str] = None) -> None:
        self._backend = backend
        self._store: Optional[MemoryStore] = None

    @property
    def backend(self) -> str:
        backend = self._backend or settings.REPOSITORY_BACKEND
        if backend not in (BACKEND_DJANGO, BACKEND_MEMORY):
            raise UnknownRepositoryBackend(f"Unknown repository backend '{backend}'.")
        return backend

    @property
    def store(self) -> MemoryStore:
        if self._store is None:
            self._store = MemoryStore()
            logger.info("memory_store.created")
        return self._store

    def reset(self) -> None:
        """Drop the memory store; the next memory repository gets a fresh one."""
        self._store = None

    def product_repository(self) -> IProductRepository:
        if self.backend == BACKEND_MEMORY:
            return ProductMemoryRepository(self.store)
        return ProductDjangoRepository()

    def user_repository(self) -> IUserRepository:
        if self.backend == BACKEND_MEMORY:
            return UserMemoryRepository(self.store)
        return UserDjangoRepository()

    def provider_repository(self) -> IProviderRepository:
        if self.backend == BACKEND_MEMORY:
            return ProviderMemoryRepository(self.store)
        return ProviderDjangoRepository()

    def stock_repository(self) -> IStockRepository:
        if self.backend == BACKEND_MEMORY:
            return StockMemoryRepository(self.store)
        return StockDjangoRepository()


container = RepositoryContainer()
