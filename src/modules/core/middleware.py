import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


class CorrelationIdMiddleware:
    """Tag every log line of a request with a correlation ID.

    The ID comes from the X-Request-ID header, or a fresh UUID4 when the
    client sends none.  It is bound into structlog contextvars together
    with the method and path, so repository and service events emitted
    while handling the request carry them, and is echoed back in the
    X-Request-ID response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.get_full_path(),
        )

        start = time.monotonic()
        logger.info("request_started")

        response = self.get_response(request)

        elapsed_ms = round((time.monotonic() - start) * 1000, 2)
        if response.status_code >= 500:
            logger.error(
                "request_failed",
                status_code=response.status_code,
                duration_ms=elapsed_ms,
            )
        else:
            logger.info(
                "request_finished",
                status_code=response.status_code,
                duration_ms=elapsed_ms,
            )

        response[REQUEST_ID_HEADER] = cid
        return response
