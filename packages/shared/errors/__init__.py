"""Standardized error handling for DIY Label services."""

from .models import (
    ErrorDetail,
    ErrorResponse,
    create_error_response,
)
from .exceptions import (
    DIYLabelException,
    TransientError,
    PermanentError,
    ValidationError,
    NotFoundError,
    ServiceUnavailableError,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "create_error_response",
    "DIYLabelException",
    "TransientError",
    "PermanentError",
    "ValidationError",
    "NotFoundError",
    "ServiceUnavailableError",
]
