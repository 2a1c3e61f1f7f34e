"""Request IDs and JSON error responses for DIY Label services."""

import logging
import uuid
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .models import create_error_response
from .exceptions import (
    DIYLabelException,
    ValidationError,
    NotFoundError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

EXCEPTION_STATUS_MAP = {
    ValidationError: 400,
    NotFoundError: 404,
    ServiceUnavailableError: 503,
}


def status_for(exc: DIYLabelException) -> int:
    """HTTP status for an exception, matching the closest mapped base class."""
    for cls in type(exc).__mro__:
        if cls in EXCEPTION_STATUS_MAP:
            return EXCEPTION_STATUS_MAP[cls]
    return 500


def get_request_id(request: Request) -> str:
    """Request ID for this request; the first call fixes it on request.state."""
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
    return request_id


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    request_id = get_request_id(request)
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def _error_json(
    request_id: str,
    status: int,
    code: str,
    message: str,
    category: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    headers = {REQUEST_ID_HEADER: request_id}
    retry_after = (details or {}).get("retry_after")
    if retry_after:
        headers["Retry-After"] = str(retry_after)
    body = create_error_response(code, message, category, details, request_id)
    return JSONResponse(status_code=status, content=body.model_dump(), headers=headers)


def diy_label_exception_handler(request: Request, exc: DIYLabelException) -> JSONResponse:
    request_id = get_request_id(request)
    logger.warning(
        "DIY Label exception",
        extra={
            "request_id": request_id,
            "context": {"error_code": exc.code, "category": exc.category, "error": exc.message},
        },
    )
    return _error_json(request_id, status_for(exc), exc.code, exc.message, exc.category, exc.details)


def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unexpected exceptions become a 500 with a generic message."""
    request_id = get_request_id(request)
    logger.exception("Unhandled exception", extra={"request_id": request_id}, exc_info=exc)
    return _error_json(
        request_id,
        500,
        "DIY_500",
        "An unexpected error occurred. Please try again later.",
        "system",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install request ID middleware and the JSON exception handlers."""
    app.middleware("http")(request_id_middleware)
    app.add_exception_handler(DIYLabelException, diy_label_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
