"""In-memory implementation of the User repository."""

from __future__ import annotations

from typing import List

import structlog

from modules.core.repositories.memory import MemoryBaseRepository
from modules.users.entities import User
from modules.users.exceptions import UserAlreadyExists, UserInUse, UserNotFound
from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)

STOCK_USER_FIELDS = ("created_by_user", "updated_by_user")


class UserMemoryRepository(MemoryBaseRepository[User], IUserRepository):
    """User repository over the ``users`` table of a ``MemoryStore``."""

    table_name = "users"

    def create(self, entity: User) -> None:
        with self._store.lock.write():
            if self._find_by("email", entity.email) is not None:
                raise UserAlreadyExists(entity.email)
            now = self.current_timestamp()
            entity.id = self._store.next_id(self.table_name)
            entity.created_at = now
            entity.updated_at = now
            self._rows[entity.id] = self._copy(entity)
        logger.info("user.created", user_id=entity.id)

    def get_by_id(self, id: int) -> User:
        with self._store.lock.read():
            row = self._rows.get(id)
            if row is None:
                raise UserNotFound(user_id=id)
            return self._copy(row)

    def get_by_email(self, email: str) -> User:
        with self._store.lock.read():
            row = self._find_by("email", email)
            if row is None:
                raise UserNotFound(email=email)
            return self._copy(row)

    def get_all(self) -> List[User]:
        with self._store.lock.read():
            return [self._copy(row) for row in self._sorted()]

    def update(self, entity: User) -> None:
        with self._store.lock.write():
            stored = self._rows.get(entity.id)
            if stored is None:
                raise UserNotFound(user_id=entity.id)
            if self._find_by("email", entity.email, exclude_id=entity.id) is not None:
                raise UserAlreadyExists(entity.email)
            entity.updated_at = self.current_timestamp()
            self._rows[entity.id] = self._copy(entity).model_copy(
                update={"created_at": stored.created_at}
            )
        logger.info("user.updated", user_id=entity.id)

    def delete(self, id: int) -> None:
        with self._store.lock.write():
            if id not in self._rows:
                raise UserNotFound(user_id=id)
            if self._is_referenced("stocks", STOCK_USER_FIELDS, id):
                raise UserInUse(id)
            del self._rows[id]
        logger.info("user.deleted", user_id=id)
