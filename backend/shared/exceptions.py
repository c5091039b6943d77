"""
Base exception classes for the Forum backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps them to HTTP responses using ``http_status``.
"""

from typing import Optional, Any


class ForumError(Exception):
    """
    Base exception for all Forum errors.

    All custom exceptions should inherit from this class.
    """

    http_status: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ForumError):
    """Resource not found."""

    http_status = 404


class ValidationError(ForumError):
    """Input validation failed."""

    http_status = 400


class AuthorizationError(ForumError):
    """The caller is not allowed to perform the operation."""

    http_status = 403


class ExternalServiceError(ForumError):
    """Error communicating with an external service."""

    http_status = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class PersistenceError(ForumError):
    """
    The backing store is unavailable or rejected a query.

    The message returned to clients is generic; the underlying cause
    is kept in ``__cause__`` for logging.
    """

    http_status = 503

    def __init__(self, operation: str):
        super().__init__(
            "Storage is temporarily unavailable",
            code="PERSISTENCE_ERROR",
            details={"operation": operation},
        )
        self.operation = operation
