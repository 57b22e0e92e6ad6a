"""Provider repositories package."""

from modules.providers.repositories.django_repository import ProviderDjangoRepository
from modules.providers.repositories.interfaces import IProviderRepository
from modules.providers.repositories.memory_repository import ProviderMemoryRepository

__all__ = ["IProviderRepository", "ProviderDjangoRepository", "ProviderMemoryRepository"]
