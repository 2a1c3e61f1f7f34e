"""Custom exceptions with error codes for DIY Label services."""

from typing import Any, Optional


class DIYLabelException(Exception):
    """Base exception for DIY Label services."""

    def __init__(
        self,
        message: str,
        code: str = "DIY_000",
        category: str = "system",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}
        super().__init__(message)


class TransientError(DIYLabelException):
    """Retryable errors: store lookups timing out, Supabase briefly unavailable."""

    def __init__(
        self,
        message: str,
        code: str = "DIY_001",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, "transient", details)


class PermanentError(DIYLabelException):
    """Non-retryable errors: invalid input, unknown shop."""

    def __init__(
        self,
        message: str,
        code: str = "DIY_002",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, "permanent", details)


class ValidationError(PermanentError):
    """Validation failures - 400 Bad Request."""

    def __init__(
        self,
        message: str,
        code: str = "DIY_400",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class NotFoundError(PermanentError):
    """Resource not found - 404."""

    def __init__(
        self,
        message: str,
        code: str = "DIY_404",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class ServiceUnavailableError(TransientError):
    """Dependency temporarily unavailable - 503."""

    def __init__(
        self,
        message: str,
        code: str = "DIY_503",
        retry_after: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        d = details or {}
        if retry_after is not None:
            d["retry_after"] = retry_after
        super().__init__(message, code, d)
