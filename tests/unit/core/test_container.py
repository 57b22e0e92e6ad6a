"""Unit tests for the repository container (backend selection)."""

from __future__ import annotations

import pytest

from modules.core.container import RepositoryContainer, UnknownRepositoryBackend
from modules.products.repositories import (
    ProductDjangoRepository,
    ProductMemoryRepository,
)
from modules.stocks.repositories import StockDjangoRepository, StockMemoryRepository
from modules.users.repositories import UserMemoryRepository

pytestmark = pytest.mark.unit


class TestRepositoryContainer:
    def test_defaults_to_configured_backend(self, settings):
        settings.REPOSITORY_BACKEND = "django"
        container = RepositoryContainer()
        assert isinstance(container.product_repository(), ProductDjangoRepository)
        assert isinstance(container.stock_repository(), StockDjangoRepository)

    def test_setting_is_read_at_call_time(self, settings):
        container = RepositoryContainer()
        settings.REPOSITORY_BACKEND = "memory"
        assert isinstance(container.product_repository(), ProductMemoryRepository)

    def test_memory_repositories_share_one_store(self):
        container = RepositoryContainer(backend="memory")
        products = container.product_repository()
        stocks = container.stock_repository()
        users = container.user_repository()
        assert isinstance(stocks, StockMemoryRepository)
        assert isinstance(users, UserMemoryRepository)
        assert products._store is stocks._store is users._store

    def test_reset_drops_store(self):
        container = RepositoryContainer(backend="memory")
        before = container.store
        container.reset()
        assert container.store is not before

    def test_unknown_backend_raises(self):
        container = RepositoryContainer(backend="redis")
        with pytest.raises(UnknownRepositoryBackend, match="redis"):
            container.product_repository()
