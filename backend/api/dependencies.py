"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests replace collaborators either by overriding the FastAPI dependency
functions below or by assigning to the container's private slots.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IPasswordHasher, ITokenIssuer
    from modules.users.interfaces import IUsersService, IUserRepository
    from modules.quotes.interfaces import (
        IQuotesService,
        IQuoteRepository,
        IExchangeRateSource,
    )


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._users_repository: "IUserRepository | None" = None
        self._quotes_repository: "IQuoteRepository | None" = None
        self._password_hasher: "IPasswordHasher | None" = None
        self._token_issuer: "ITokenIssuer | None" = None
        self._rate_source: "IExchangeRateSource | None" = None
        self._users_service: "IUsersService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._quotes_service: "IQuotesService | None" = None

    @property
    def users_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._users_repository is None:
            from modules.users.repository import SupabaseUserRepository
            from shared.database import get_supabase_client
            self._users_repository = SupabaseUserRepository(get_supabase_client())
        return self._users_repository

    @property
    def quotes_repository(self) -> "IQuoteRepository":
        """Get the quote repository instance."""
        if self._quotes_repository is None:
            from modules.quotes.repository import SupabaseQuoteRepository
            from shared.database import get_supabase_client
            self._quotes_repository = SupabaseQuoteRepository(get_supabase_client())
        return self._quotes_repository

    @property
    def password_hasher(self) -> "IPasswordHasher":
        if self._password_hasher is None:
            from modules.auth.passwords import Argon2PasswordHasher
            self._password_hasher = Argon2PasswordHasher()
        return self._password_hasher

    @property
    def token_issuer(self) -> "ITokenIssuer":
        """Get the token issuer, configured from settings."""
        if self._token_issuer is None:
            from modules.auth.tokens import JWTTokenIssuer
            settings = get_settings()
            self._token_issuer = JWTTokenIssuer(
                secret=settings.jwt_secret_key,
                access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
                refresh_ttl=timedelta(days=settings.refresh_token_expire_days),
                algorithm=settings.jwt_algorithm,
            )
        return self._token_issuer

    @property
    def rate_source(self) -> "IExchangeRateSource":
        if self._rate_source is None:
            from modules.quotes.rates import CryptoMarketRateSource
            settings = get_settings()
            self._rate_source = CryptoMarketRateSource(
                base_url=settings.crypto_market_api_url,
                timeout=settings.rate_api_timeout,
            )
        return self._rate_source

    @property
    def users(self) -> "IUsersService":
        """Get the users service instance."""
        if self._users_service is None:
            from modules.users.service import UsersService
            self._users_service = UsersService(
                repository=self.users_repository,
                hasher=self.password_hasher,
            )
        return self._users_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.users,
                hasher=self.password_hasher,
                tokens=self.token_issuer,
            )
        return self._auth_service

    @property
    def quotes(self) -> "IQuotesService":
        """Get the quotes service instance."""
        if self._quotes_service is None:
            from modules.quotes.service import QuotesService
            settings = get_settings()
            self._quotes_service = QuotesService(
                repository=self.quotes_repository,
                rates=self.rate_source,
                quote_ttl=timedelta(minutes=settings.quote_ttl_minutes),
            )
        return self._quotes_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._users_repository = None
        self._quotes_repository = None
        self._password_hasher = None
        self._token_issuer = None
        self._rate_source = None
        self._users_service = None
        self._auth_service = None
        self._quotes_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_users_service() -> "IUsersService":
    """FastAPI dependency for users service."""
    return get_container().users


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_quotes_service() -> "IQuotesService":
    """FastAPI dependency for quotes service."""
    return get_container().quotes


def get_token_issuer() -> "ITokenIssuer":
    """FastAPI dependency for the token issuer used by bearer auth."""
    return get_container().token_issuer
