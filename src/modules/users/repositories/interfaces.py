"""User repository interface.

Extends ``IRepository[User]`` with a lookup by the unique email.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.users.entities import User


class IUserRepository(IRepository["User"]):
    """Repository contract for the User entity."""

    @abstractmethod
    def get_by_email(self, email: str) -> User:
        """Retrieve a user by email; raises ``UserNotFound`` when absent."""
