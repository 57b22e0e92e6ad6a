"""Provider API views."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.container import container
from modules.core.views import parse_id
from modules.providers.dtos import CreateProviderDTO, UpdateProviderDTO
from modules.providers.exceptions import (
    ProviderAlreadyExists,
    ProviderInUse,
    ProviderNotFound,
)
from modules.providers.serializers import ProviderSerializer
from modules.providers.services import ProviderService

INVALID_ID = {"detail": "Invalid provider ID."}


class ProviderViewSet(GenericViewSet):
    """ViewSet for Provider CRUD operations."""

    serializer_class = ProviderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProviderService(repository=container.provider_repository())

    def list(self, request: Request) -> Response:
        """GET /api/providers/"""
        providers = self._service.list_providers()
        return Response(ProviderSerializer(providers, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/providers/{pk}/"""
        provider_id = parse_id(pk)
        if provider_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            provider = self._service.get_provider(provider_id)
        except ProviderNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProviderSerializer(provider).data)

    def create(self, request: Request) -> Response:
        """POST /api/providers/"""
        try:
            dto = CreateProviderDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            provider = self._service.create_provider(dto)
        except ProviderAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(
            ProviderSerializer(provider).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/providers/{pk}/"""
        provider_id = parse_id(pk)
        if provider_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            dto = UpdateProviderDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            provider = self._service.update_provider(provider_id, dto)
        except ProviderNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ProviderAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(ProviderSerializer(provider).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/providers/{pk}/"""
        provider_id = parse_id(pk)
        if provider_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            self._service.delete_provider(provider_id)
        except ProviderNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ProviderInUse as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)
