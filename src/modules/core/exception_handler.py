"""DRF exception handling for domain errors.

Built on *drf-standardized-errors*: every error response has the shape::

    {"type": "validation_error" | "client_error" | "server_error",
     "errors": [{"code": "...", "detail": "...", "attr": "..." | null}]}

Domain exceptions raised by the services are converted to their DRF
equivalent before formatting:

- ``shared.domain.exceptions.ValidationError`` -> 400 ``validation_error``
- ``shared.domain.exceptions.NotFoundError`` -> 404 ``client_error``
- ``pydantic.ValidationError`` (DTO construction) -> 400 with one entry
  per invalid field
"""

from __future__ import annotations

from typing import Dict, List

import structlog
from drf_standardized_errors.handler import ExceptionHandler
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions

from shared.domain.exceptions import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


def pydantic_errors_to_detail(exc: PydanticValidationError) -> Dict[str, List[str]]:
    """Group pydantic error messages by dotted field location.

    Messages raised as ``ValueError`` by DTO validators are shown without
    pydantic's "Value error, " prefix.  Errors with no location (such as a
    JSON array where an object is expected) go under ``non_field_errors``.
    """
    detail: Dict[str, List[str]] = {}
    for error in exc.errors():
        attr = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
        if error["type"] == "value_error" and "error" in error.get("ctx", {}):
            message = str(error["ctx"]["error"])
        else:
            message = error["msg"]
        detail.setdefault(attr, []).append(message)
    return detail


class DomainExceptionHandler(ExceptionHandler):
    def convert_known_exceptions(self, exc: Exception) -> Exception:
        if isinstance(exc, ValidationError):
            logger.info("api.validation_error", code=exc.code, detail=exc.message)
            return exceptions.ValidationError(exc.message, code=exc.code)
        if isinstance(exc, NotFoundError):
            logger.info("api.not_found", detail=exc.message)
            return exceptions.NotFound(exc.message, code=exc.code)
        if isinstance(exc, PydanticValidationError):
            return exceptions.ValidationError(pydantic_errors_to_detail(exc))
        return super().convert_known_exceptions(exc)

    def report_exception(self, exc: exceptions.APIException, response) -> None:
        if response.status_code >= 500:
            logger.error(
                "api.unhandled_exception",
                exc_type=type(self.exc).__name__,
                status_code=response.status_code,
            )
        super().report_exception(exc, response)
