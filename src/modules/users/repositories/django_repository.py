"""Django ORM implementation of the User repository."""

from __future__ import annotations

from typing import List

import structlog
from django.db import IntegrityError, transaction

from modules.core.repositories.django_repository import DjangoBaseRepository
from modules.users.entities import User
from modules.users.exceptions import UserAlreadyExists, UserInUse, UserNotFound
from modules.users.models import UserRow
from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class UserDjangoRepository(DjangoBaseRepository, IUserRepository):
    """Concrete User repository backed by Django ORM."""

    def create(self, entity: User) -> None:
        now = self.current_timestamp()
        try:
            with transaction.atomic():
                row = UserRow.objects.create(
                    name=entity.name,
                    email=entity.email,
                    role=entity.role,
                    password=entity.password,
                    created_at=now,
                    updated_at=now,
                )
        except IntegrityError as exc:
            if self.is_duplicate_entry(exc):
                logger.warning("user.duplicate_email", email=entity.email)
                raise UserAlreadyExists(entity.email) from exc
            raise

        entity.id = row.id
        entity.created_at = now
        entity.updated_at = now
        logger.info("user.created", user_id=row.id)

    def get_by_id(self, id: int) -> User:
        try:
            row = UserRow.objects.get(pk=id)
        except UserRow.DoesNotExist as exc:
            raise UserNotFound(user_id=id) from exc
        return User.model_validate(row)

    def get_by_email(self, email: str) -> User:
        try:
            row = UserRow.objects.get(email=email)
        except UserRow.DoesNotExist as exc:
            raise UserNotFound(email=email) from exc
        return User.model_validate(row)

    def get_all(self) -> List[User]:
        return [User.model_validate(row) for row in UserRow.objects.order_by("id")]

    def update(self, entity: User) -> None:
        now = self.current_timestamp()
        try:
            with transaction.atomic():
                affected = UserRow.objects.filter(pk=entity.id).update(
                    name=entity.name,
                    email=entity.email,
                    role=entity.role,
                    password=entity.password,
                    updated_at=now,
                )
        except IntegrityError as exc:
            if self.is_duplicate_entry(exc):
                logger.warning("user.duplicate_email", email=entity.email)
                raise UserAlreadyExists(entity.email) from exc
            raise

        if affected == 0:
            raise UserNotFound(user_id=entity.id)
        entity.updated_at = now
        logger.info("user.updated", user_id=entity.id)

    def delete(self, id: int) -> None:
        try:
            with transaction.atomic():
                deleted, _ = UserRow.objects.filter(pk=id).delete()
        except IntegrityError as exc:
            if self.is_foreign_key_violation(exc):
                logger.warning("user.in_use", user_id=id)
                raise UserInUse(id) from exc
            raise

        if deleted == 0:
            raise UserNotFound(user_id=id)
        logger.info("user.deleted", user_id=id)
