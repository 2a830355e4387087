"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import QuoteDeskError, AuthenticationError


class AuthenticationFailedError(AuthenticationError):
    """
    Raised when login or registration fails.

    The client-facing message is identical for every cause. ``reason``
    distinguishes causes for logging and is never serialized.
    """

    def __init__(self, reason: Optional[str] = None):
        super().__init__("Invalid credentials", code="AUTHENTICATION_FAILED")
        self.reason = reason


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid, malformed or superseded."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(InvalidTokenError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message)
        self.code = "TOKEN_EXPIRED"


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class UnauthorizedError(AuthenticationError):
    """Raised when a token flow fails for a reason that is not a known token error."""

    def __init__(self, message: str = "Not authorized to access this resource"):
        super().__init__(message, code="UNAUTHORIZED")


class TokenGenerationFailedError(QuoteDeskError):
    """Raised when tokens cannot be signed or the refresh token cannot be stored."""

    def __init__(self):
        super().__init__("Failed to generate tokens", code="TOKEN_GENERATION_FAILED")
