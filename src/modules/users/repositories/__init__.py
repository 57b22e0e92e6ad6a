"""User repositories package."""

from modules.users.repositories.django_repository import UserDjangoRepository
from modules.users.repositories.interfaces import IUserRepository
from modules.users.repositories.memory_repository import UserMemoryRepository

__all__ = ["IUserRepository", "UserDjangoRepository", "UserMemoryRepository"]
