"""Stock API views.

Exposes the ``StockService`` via HTTP using DRF ViewSets.  Writes are
answered with the stock re-read through the service so the response
carries the hydrated product, users and provider.

Error mapping:
- ``StockAlreadyExists`` -> 409
- ``StockNotFound`` -> 404
- ``InvalidStockReference`` and request validation failures -> 400
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.container import container
from modules.core.views import parse_id
from modules.stocks.dtos import CreateStockDTO, UpdateStockDTO
from modules.stocks.exceptions import (
    InvalidStockReference,
    StockAlreadyExists,
    StockNotFound,
)
from modules.stocks.serializers import StockSerializer
from modules.stocks.services import StockService

INVALID_ID = {"detail": "Invalid stock ID."}


class StockViewSet(GenericViewSet):
    """ViewSet for Stock operations.

    Uses ``StockService`` with the repository the container selects for
    the configured backend.
    """

    serializer_class = StockSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = StockService(repository=container.stock_repository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/stocks/"""
        stocks = self._service.list_stocks()
        return Response(StockSerializer(stocks, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/stocks/{pk}/"""
        stock_id = parse_id(pk)
        if stock_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            stock = self._service.get_stock(stock_id)
        except StockNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(StockSerializer(stock).data)

    @action(detail=False, methods=["get"], url_path=r"product/(?P<product_id>[^/]+)")
    def by_product(self, request: Request, product_id: str | None = None) -> Response:
        """GET /api/stocks/product/{product_id}/"""
        parsed = parse_id(product_id)
        if parsed is None:
            return Response(
                {"detail": "Invalid product ID."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        stocks = self._service.get_stocks_by_product_id(parsed)
        return Response(StockSerializer(stocks, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"serial/(?P<serial>[^/]+)")
    def by_serial(self, request: Request, serial: str | None = None) -> Response:
        """GET /api/stocks/serial/{serial}/"""
        if not serial:
            return Response(
                {"detail": "Serial number is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            stock = self._service.get_stock_by_serial(serial)
        except StockNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(StockSerializer(stock).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/stocks/"""
        try:
            dto = CreateStockDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            created = self._service.create_stock(dto)
            stock = self._service.get_stock(created.id)
        except StockAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        except InvalidStockReference as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except StockNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response(StockSerializer(stock).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/stocks/{pk}/"""
        stock_id = parse_id(pk)
        if stock_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            dto = UpdateStockDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            self._service.update_stock(stock_id, dto)
            stock = self._service.get_stock(stock_id)
        except StockNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except StockAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        except InvalidStockReference as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(StockSerializer(stock).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/stocks/{pk}/"""
        stock_id = parse_id(pk)
        if stock_id is None:
            return Response(INVALID_ID, status=status.HTTP_400_BAD_REQUEST)
        try:
            self._service.delete_stock(stock_id)
        except StockNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
