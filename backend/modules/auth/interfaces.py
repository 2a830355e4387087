"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with fakes and swapping the
hashing or token scheme without touching callers.
"""

from typing import Protocol, runtime_checkable

from .models import AuthTokens, TokenPair, TokenPayload


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way password hashing with salted, constant-time verification."""

    async def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        ...

    async def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the password matches the hash, False otherwise."""
        ...


@runtime_checkable
class ITokenIssuer(Protocol):
    """Signs and verifies bearer tokens with a shared secret."""

    async def issue(self, user_id: str, email: str) -> TokenPair:
        """
        Sign an access token and a refresh token for the same subject.

        Raises:
            TokenGenerationFailedError: If signing fails
        """
        ...

    async def verify(self, token: str) -> TokenPayload:
        """
        Verify signature and expiry and return the claims.

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed or badly signed
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def register(self, name: str, email: str, password: str) -> AuthTokens:
        """
        Register a user and sign them in.

        Raises:
            IncompleteInputError: If any field is blank
            PasswordPolicyError: If the password is too weak
            UserAlreadyExistsError: If the email is taken
            TokenGenerationFailedError: If tokens cannot be issued
            AuthenticationFailedError: For any other failure
        """
        ...

    async def login(self, email: str, password: str) -> AuthTokens:
        """
        Verify credentials and issue a new token pair.

        Raises:
            AuthenticationFailedError: Same error for unknown email and wrong password
            TokenGenerationFailedError: If tokens cannot be issued
        """
        ...

    async def refresh_tokens(self, refresh_token: str) -> AuthTokens:
        """
        Exchange the current refresh token for a new pair.

        Raises:
            InvalidTokenError: If the token is invalid, expired or superseded
            UnauthorizedError: For any other failure
            TokenGenerationFailedError: If tokens cannot be issued
        """
        ...
