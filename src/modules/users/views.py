"""User API views."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.container import container
from modules.core.views import parse_id
from modules.users.dtos import CreateUserDTO, UpdateUserDTO
from modules.users.exceptions import UserAlreadyExists, UserInUse, UserNotFound
from modules.users.serializers import UserSerializer
from modules.users.services import UserService

INVALID_ID = {"detail": "Invalid user ID."}


class UserViewSet(GenericViewSet):
    """ViewSet for User CRUD operations plus lookup by email."""

    serializer_class = UserSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = UserService(repository=container.user_repository())

    def list(self, request: Request) -> Response:
        """GET /api/users/"""
        users = self._service.list_users()
        return Response(UserSerializer(users, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/users/{pk}/"""
        user_id = parse_id(pk)
        if user_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            user = self._service.get_user(user_id)
        except UserNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(UserSerializer(user).data)

    @action(detail=False, methods=["get"], url_path=r"email/(?P<email>[^/]+)")
    def by_email(self, request: Request, email: str | None = None) -> Response:
        """GET /api/users/email/{email}/"""
        try:
            user = self._service.get_user_by_email(email or "")
        except UserNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(UserSerializer(user).data)

    def create(self, request: Request) -> Response:
        """POST /api/users/"""
        try:
            dto = CreateUserDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            user = self._service.create_user(dto)
        except UserAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/users/{pk}/"""
        user_id = parse_id(pk)
        if user_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            dto = UpdateUserDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            user = self._service.update_user(user_id, dto)
        except UserNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except UserAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(UserSerializer(user).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/users/{pk}/"""
        user_id = parse_id(pk)
        if user_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            self._service.delete_user(user_id)
        except UserNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except UserInUse as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)
