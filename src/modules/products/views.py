"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into HTTP status codes;
anything else propagates as a server error.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.container import container
from modules.core.views import parse_id
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductInUse,
    ProductNotFound,
)
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

INVALID_ID = {"detail": "Invalid product ID."}


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the repository the container selects for
    the configured backend.  All storage access goes through the
    service/repository layer.
    """

    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=container.product_repository())

    def list(self, request: Request) -> Response:
        """GET /api/products/"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}/"""
        product_id = parse_id(pk)
        if product_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            product = self._service.get_product(product_id)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        """POST /api/products/"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}/"""
        product_id = parse_id(pk)
        if product_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.update_product(product_id, dto)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ProductAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}/"""
        product_id = parse_id(pk)
        if product_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            self._service.delete_product(product_id)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ProductInUse as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)
