"""User domain exceptions."""

from __future__ import annotations

from typing import Optional

from modules.core.exceptions import AlreadyExistsError, InUseError, NotFoundError


class UserAlreadyExists(AlreadyExistsError):
    """A user with the same email already exists."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"user with email {email} already exists")


class UserNotFound(NotFoundError):
    """The requested user does not exist.

    Carries whichever key the lookup used: ``user_id`` or ``email``.
    """

    def __init__(
        self, user_id: Optional[int] = None, email: Optional[str] = None
    ) -> None:
        self.user_id = user_id
        self.email = email
        if email is not None:
            message = f"user with email {email} not found"
        else:
            message = f"user with ID {user_id} not found"
        super().__init__(message)


class UserInUse(InUseError):
    """The user is still recorded as creator or updater of stock rows."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"user with ID {user_id} is referenced by stocks")
