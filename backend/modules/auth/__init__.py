"""
Authentication module.

Handles registration, login, token issuance and refresh-token rotation.

Public API:
- IAuthService: Interface for auth operations
- ITokenIssuer, IPasswordHasher: Collaborator interfaces
- AuthTokens, TokenPair, TokenPayload: Token models
- Auth exceptions: AuthenticationFailedError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, ITokenIssuer, IPasswordHasher
from .models import (
    AuthTokens,
    TokenPair,
    TokenPayload,
    RegisterRequest,
    LoginRequest,
    RefreshRequest,
)
from .exceptions import (
    AuthenticationFailedError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UnauthorizedError,
    TokenGenerationFailedError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ITokenIssuer",
    "IPasswordHasher",
    # Models
    "AuthTokens",
    "TokenPair",
    "TokenPayload",
    "RegisterRequest",
    "LoginRequest",
    "RefreshRequest",
    # Exceptions
    "AuthenticationFailedError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UnauthorizedError",
    "TokenGenerationFailedError",
]
