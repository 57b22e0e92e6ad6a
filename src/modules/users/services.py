"""User service layer (Use Cases).

Rules enforced here:
- Registration rejects an email that is already taken before inserting
  (the repository's unique index still guards concurrent callers).
- Updates are selective: name, email and role are rewritten, the
  password only when a non-empty one is supplied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.utils import timezone

from modules.users.entities import User
from modules.users.exceptions import UserAlreadyExists, UserNotFound

if TYPE_CHECKING:
    from modules.users.dtos import CreateUserDTO, UpdateUserDTO
    from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class UserService:
    """Application service for User use-cases."""

    def __init__(self, repository: IUserRepository) -> None:
        self._repo = repository

    def create_user(self, dto: CreateUserDTO) -> User:
        """Register a new user.

        Raises:
            UserAlreadyExists: if the email is already registered.
        """
        try:
            self._repo.get_by_email(dto.email)
        except UserNotFound:
            user = User.new(
                name=dto.name,
                email=dto.email,
                role=dto.role,
                password=dto.password,
            )
            self._repo.create(user)
            return user

        logger.warning("user.duplicate_email", email=dto.email)
        raise UserAlreadyExists(dto.email)

    def update_user(self, id: int, dto: UpdateUserDTO) -> User:
        """Selectively rewrite an existing user.

        Raises:
            UserNotFound: if the user does not exist.
            UserAlreadyExists: if the new email collides.
        """
        user = self._repo.get_by_id(id)
        user.name = dto.name
        user.email = dto.email
        user.role = dto.role
        user.updated_at = timezone.now()
        if dto.password:
            user.password = dto.password
        self._repo.update(user)
        return user

    def delete_user(self, id: int) -> None:
        """Raises ``UserNotFound`` if the user does not exist."""
        self._repo.get_by_id(id)
        self._repo.delete(id)

    def get_user(self, id: int) -> User:
        return self._repo.get_by_id(id)

    def get_user_by_email(self, email: str) -> User:
        return self._repo.get_by_email(email)

    def list_users(self) -> List[User]:
        return self._repo.get_all()
