import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128


def _incoming_request_id(request: HttpRequest) -> str:
    value = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if value and len(value) <= MAX_REQUEST_ID_LENGTH:
        return value
    return str(uuid.uuid4())


class CorrelationIdMiddleware:
    """Tag every request and its log lines with a request id.

    The id comes from ``X-Request-ID`` (a UUID4 replaces a missing or
    oversized header) and is echoed on the response.  Method and path are
    bound next to it, so service log lines can be traced to their request.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = _incoming_request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid, method=request.method, path=request.path
        )

        started = time.perf_counter()
        logger.info("request.started")
        try:
            response = self.get_response(request)
            logger.info(
                "request.finished",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response[REQUEST_ID_HEADER] = cid
        return response
