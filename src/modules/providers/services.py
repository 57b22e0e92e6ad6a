"""Provider service layer (Use Cases)."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from django.utils import timezone

from modules.providers.entities import Provider

if TYPE_CHECKING:
    from modules.providers.dtos import CreateProviderDTO, UpdateProviderDTO
    from modules.providers.repositories.interfaces import IProviderRepository


class ProviderService:
    """Application service for Provider use-cases.

    Update and delete confirm the provider exists before writing.
    """

    def __init__(self, repository: IProviderRepository) -> None:
        self._repo = repository

    def create_provider(self, dto: CreateProviderDTO) -> Provider:
        provider = Provider.new(
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
        )
        self._repo.create(provider)
        return provider

    def update_provider(self, id: int, dto: UpdateProviderDTO) -> Provider:
        existing = self._repo.get_by_id(id)
        provider = Provider(
            id=id,
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
            created_at=existing.created_at,
            updated_at=timezone.now(),
        )
        self._repo.update(provider)
        return provider

    def delete_provider(self, id: int) -> None:
        self._repo.get_by_id(id)
        self._repo.delete(id)

    def get_provider(self, id: int) -> Provider:
        return self._repo.get_by_id(id)

    def list_providers(self) -> List[Provider]:
        return self._repo.get_all()
