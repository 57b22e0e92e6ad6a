"""Provider domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import AlreadyExistsError, InUseError, NotFoundError


class ProviderAlreadyExists(AlreadyExistsError):
    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"provider with email {email} already exists")


class ProviderNotFound(NotFoundError):
    def __init__(self, provider_id: int) -> None:
        self.provider_id = provider_id
        super().__init__(f"provider with ID {provider_id} not found")


class ProviderInUse(InUseError):
    def __init__(self, provider_id: int) -> None:
        self.provider_id = provider_id
        super().__init__(f"provider with ID {provider_id} is referenced by stocks")
