"""Unit tests for UserService.

Covers:
- create_user: email pre-check, then insert.
- update_user: selective update (password only if non-empty).
- delete_user: existence check first.
"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from modules.users.dtos import CreateUserDTO, UpdateUserDTO
from modules.users.entities import User
from modules.users.exceptions import UserAlreadyExists, UserNotFound
from modules.users.repositories import UserMemoryRepository
from modules.users.services import UserService

pytestmark = pytest.mark.unit

CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return UserService(repository=mock_repo)


def _existing() -> User:
    return User(
        id=1,
        name="Ana",
        email="ana@example.com",
        role="admin",
        password="old-secret",
        created_at=CREATED,
        updated_at=CREATED,
    )


class TestCreateUser:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_email.side_effect = UserNotFound(email="ana@example.com")

        user = service.create_user(
            CreateUserDTO(name="Ana", email="ana@example.com", role="admin", password="pw")
        )

        mock_repo.create.assert_called_once_with(user)
        assert user.password == "pw"
        assert user.created_at == user.updated_at

    def test_existing_email_rejected_before_insert(self, service, mock_repo):
        mock_repo.get_by_email.return_value = _existing()

        with pytest.raises(UserAlreadyExists, match="ana@example.com"):
            service.create_user(CreateUserDTO(name="Ana", email="ana@example.com"))

        mock_repo.create.assert_not_called()


class TestUpdateUser:
    def test_rewrites_name_email_role(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _existing()

        user = service.update_user(
            1, UpdateUserDTO(name="Bia", email="bia@example.com", role="operator")
        )

        assert (user.name, user.email, user.role) == ("Bia", "bia@example.com", "operator")
        assert user.created_at == CREATED
        assert user.updated_at > CREATED
        mock_repo.update.assert_called_once_with(user)

    def test_empty_password_keeps_stored_one(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _existing()
        user = service.update_user(
            1, UpdateUserDTO(name="Ana", email="ana@example.com", password="")
        )
        assert user.password == "old-secret"

    def test_non_empty_password_replaces(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _existing()
        user = service.update_user(
            1, UpdateUserDTO(name="Ana", email="ana@example.com", password="new")
        )
        assert user.password == "new"

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.side_effect = UserNotFound(user_id=1)
        with pytest.raises(UserNotFound):
            service.update_user(1, UpdateUserDTO(name="Ana", email="ana@example.com"))
        mock_repo.update.assert_not_called()


class TestDeleteUser:
    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.side_effect = UserNotFound(user_id=9)
        with pytest.raises(UserNotFound):
            service.delete_user(9)
        mock_repo.delete.assert_not_called()

    def test_deletes(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _existing()
        service.delete_user(1)
        mock_repo.delete.assert_called_once_with(1)


class TestWithMemoryRepository:
    def test_lookup_by_email(self, memory_store):
        service = UserService(repository=UserMemoryRepository(memory_store))
        created = service.create_user(CreateUserDTO(name="Ana", email="ana@example.com"))
        assert service.get_user_by_email("ana@example.com").id == created.id
        assert [u.id for u in service.list_users()] == [created.id]
        assert service.get_user(created.id).name == "Ana"
