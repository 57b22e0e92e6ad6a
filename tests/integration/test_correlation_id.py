import logging
import uuid
from unittest.mock import patch

import pytest
from django.db import DatabaseError
from rest_framework.test import APIClient

from modules.stocks.services import StockService

pytestmark = pytest.mark.integration


def _events(caplog, name):
    return [
        r.msg
        for r in caplog.records
        if isinstance(r.msg, dict) and r.msg.get("event") == name
    ]


class TestCorrelationIdOnApi:
    def test_echoed_on_domain_errors(self, api_client_with_correlation):
        client, cid = api_client_with_correlation
        response = client.get("/api/stocks/999/")
        assert response.status_code == 404
        assert response["X-Request-ID"] == cid

    def test_generated_as_uuid4_for_stock_listing(self, api_client):
        request_id = api_client.get("/api/stocks/")["X-Request-ID"]
        assert uuid.UUID(request_id).version == 4

    def test_distinct_ids_per_request(self, api_client):
        first = api_client.get("/api/products/")["X-Request-ID"]
        second = api_client.get("/api/products/")["X-Request-ID"]
        assert first != second


class TestRequestEvents:
    def test_method_and_path_bound_to_domain_events(self, api_client, product, caplog):
        with caplog.at_level(logging.INFO):
            api_client.delete(
                f"/api/products/{product.id}/", HTTP_X_REQUEST_ID="cid-delete-1"
            )
        (deleted,) = _events(caplog, "product.deleted")
        assert deleted["correlation_id"] == "cid-delete-1"
        assert deleted["method"] == "DELETE"
        assert deleted["path"] == f"/api/products/{product.id}/"

    def test_request_finished_for_stock_lookup(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.get("/api/stocks/serial/SN-404/", HTTP_X_REQUEST_ID="cid-2")
        (finished,) = _events(caplog, "request_finished")
        assert finished["correlation_id"] == "cid-2"
        assert finished["method"] == "GET"
        assert finished["path"] == "/api/stocks/serial/SN-404/"
        assert finished["status_code"] == 404
        assert finished["duration_ms"] >= 0
        assert _events(caplog, "request_started")

    def test_server_errors_logged_as_request_failed(self, caplog):
        client = APIClient(raise_request_exception=False)
        with patch.object(
            StockService, "list_stocks", side_effect=DatabaseError("down")
        ), caplog.at_level(logging.INFO):
            response = client.get("/api/stocks/", HTTP_X_REQUEST_ID="cid-500")
        assert response.status_code == 500
        assert response["X-Request-ID"] == "cid-500"
        (failed,) = _events(caplog, "request_failed")
        assert failed["status_code"] == 500
        assert not _events(caplog, "request_finished")
