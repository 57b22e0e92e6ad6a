"""Stock repositories package."""

from modules.stocks.repositories.django_repository import StockDjangoRepository
from modules.stocks.repositories.interfaces import IStockRepository
from modules.stocks.repositories.memory_repository import StockMemoryRepository

__all__ = ["IStockRepository", "StockDjangoRepository", "StockMemoryRepository"]
