"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory repositories, a recording rate source, a fast password hasher,
token helpers and a TestClient wired to those doubles.
"""

import pytest
from datetime import datetime, timezone, timedelta
from decimal import Decimal
from typing import Optional
from uuid import uuid4

import jwt  # PyJWT
from fastapi.testclient import TestClient

from api import app
from api.dependencies import (
    get_auth_service,
    get_quotes_service,
    get_token_issuer,
    get_users_service,
    reset_container,
)
from modules.auth.service import AuthService
from modules.auth.tokens import JWTTokenIssuer
from modules.quotes.exceptions import ExternalRateUnavailableError
from modules.quotes.models import Currency, NewQuote, Quote
from modules.quotes.service import QuotesService
from modules.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from modules.users.models import NewUser, User
from modules.users.service import UsersService
from shared.config import get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_USER_ID = "7c1a1f8e-3a4b-4a5e-9f1d-2b3c4d5e6f70"
TEST_USER_EMAIL = "test@example.com"


def create_test_token(
    user_id: str = TEST_USER_ID,
    email: str = TEST_USER_EMAIL,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a signed token carrying the claims the issuer requires.

    Args:
        user_id: Subject claim
        email: Email claim
        expired: If True, creates a token that expired an hour ago
        secret: Signing secret; pass another value to get a tampered token
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "exp": int(exp.timestamp()),
        "iat": int((now - timedelta(hours=2)).timestamp()),
        "jti": str(uuid4()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


class InMemoryUserRepository:
    """IUserRepository backed by a dict, keyed by user id."""

    def __init__(self):
        self.users: dict[str, User] = {}

    def add(self, name: str = "Test User", email: str = TEST_USER_EMAIL,
            password_hash: str = "hashed:Secret#123", user_id: Optional[str] = None) -> User:
        now = datetime.now(timezone.utc)
        user = User(
            id=user_id or str(uuid4()),
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def create(self, data: NewUser) -> User:
        if await self.find_by_email(data.email) is not None:
            raise UserAlreadyExistsError(data.email)
        return self.add(name=data.name, email=data.email, password_hash=data.password_hash)

    async def update_refresh_token(self, user_id: str, refresh_token: Optional[str]) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        updated = user.model_copy(
            update={"refresh_token": refresh_token, "updated_at": datetime.now(timezone.utc)}
        )
        self.users[user_id] = updated
        return updated

    async def list_all(self) -> list[User]:
        return list(self.users.values())


class InMemoryQuoteRepository:
    """IQuoteRepository backed by a dict; soft-deleted rows stay in the dict."""

    def __init__(self):
        self.quotes: dict[str, Quote] = {}

    def add(self, data: NewQuote) -> Quote:
        now = datetime.now(timezone.utc)
        quote = Quote(id=str(uuid4()), created_at=now, updated_at=now, **data.model_dump())
        self.quotes[quote.id] = quote
        return quote

    async def create(self, data: NewQuote) -> Quote:
        return self.add(data)

    async def find_by_id(self, quote_id: str) -> Optional[Quote]:
        quote = self.quotes.get(quote_id)
        if quote is None or quote.is_deleted:
            return None
        return quote

    async def find_by_user_id(self, user_id: str) -> list[Quote]:
        return [
            q for q in self.quotes.values()
            if q.user_id == user_id and not q.is_deleted
        ]

    async def soft_delete(self, quote_id: str) -> Optional[Quote]:
        quote = await self.find_by_id(quote_id)
        if quote is None:
            return None
        now = datetime.now(timezone.utc)
        deleted = quote.model_copy(update={"deleted_at": now, "updated_at": now})
        self.quotes[quote_id] = deleted
        return deleted


class FakeRateSource:
    """IExchangeRateSource returning a fixed rate and recording every call."""

    def __init__(self, rate: Decimal = Decimal("0.0000023")):
        self.rate = rate
        self.error: Optional[Exception] = None
        self.calls: list[tuple[Currency, Currency]] = []

    async def get_rate(self, from_currency: Currency, to_currency: Currency) -> Decimal:
        self.calls.append((from_currency, to_currency))
        if self.error is not None:
            raise self.error
        return self.rate

    def fail_with(self, reason: str = "http_error") -> None:
        self.error = ExternalRateUnavailableError(reason)


class FakePasswordHasher:
    """IPasswordHasher that prefixes instead of hashing, to keep tests fast."""

    async def hash(self, password: str) -> str:
        return f"hashed:{password}"

    async def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and the service container around each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def quote_repository() -> InMemoryQuoteRepository:
    return InMemoryQuoteRepository()


@pytest.fixture
def rate_source() -> FakeRateSource:
    return FakeRateSource()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def token_issuer() -> JWTTokenIssuer:
    return JWTTokenIssuer(TEST_JWT_SECRET)


@pytest.fixture
def users_service(user_repository, password_hasher) -> UsersService:
    return UsersService(repository=user_repository, hasher=password_hasher)


@pytest.fixture
def auth_service(users_service, password_hasher, token_issuer) -> AuthService:
    return AuthService(users=users_service, hasher=password_hasher, tokens=token_issuer)


@pytest.fixture
def quotes_service(quote_repository, rate_source) -> QuotesService:
    return QuotesService(repository=quote_repository, rates=rate_source)


@pytest.fixture
def registered_user(user_repository) -> User:
    """A user already in the store with password ``Secret#123``."""
    return user_repository.add(user_id=TEST_USER_ID)


@pytest.fixture
def make_token():
    """Factory fixture for signed test tokens; see create_test_token."""
    return create_test_token


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization headers with a valid access token for TEST_USER_ID."""
    return {"Authorization": f"Bearer {create_test_token()}"}


@pytest.fixture
def client(users_service, auth_service, quotes_service, token_issuer):
    """TestClient whose services run on the in-memory doubles."""
    app.dependency_overrides[get_users_service] = lambda: users_service
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_quotes_service] = lambda: quotes_service
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
