"""
Base exception classes for the QuoteDesk backend.

Each module should define its own exceptions that inherit from these bases.
The category base decides the HTTP status; the module subclass decides the
stable machine-readable code.
"""

from typing import Optional, Any


class QuoteDeskError(Exception):
    """
    Base exception for all QuoteDesk errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

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


class ValidationError(QuoteDeskError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(QuoteDeskError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class NotFoundError(QuoteDeskError):
    """Resource not found."""

    status_code = 404


class ConflictError(QuoteDeskError):
    """Resource already exists."""

    status_code = 409


class ExternalServiceError(QuoteDeskError):
    """Error communicating with an external service."""

    status_code = 503

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
