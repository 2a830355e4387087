"""
Users service implementation.

Owns registration rules (required fields, password policy, unique email)
and lookups over the credential store.
"""

import logging
from typing import Optional

from modules.auth.interfaces import IPasswordHasher

from .interfaces import IUsersService, IUserRepository
from .models import User, NewUser
from .exceptions import (
    IncompleteInputError,
    PasswordHashFailedError,
    PasswordPolicyError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


MIN_PASSWORD_LENGTH = 8
SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")


def find_missing_fields(name: str, email: str, password: str) -> list[str]:
    """Return the names of registration fields that are blank."""
    fields = {"name": name, "email": email, "password": password}
    return [field for field, value in fields.items() if not (value or "").strip()]


def is_password_secure(password: str) -> bool:
    """Password policy: minimum length plus at least one special character."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return False
    return any(char in SPECIAL_CHARACTERS for char in password)


class UsersService(IUsersService):
    """
    Users service backed by an injected repository and password hasher.

    Implements IUsersService protocol.
    """

    def __init__(self, repository: IUserRepository, hasher: IPasswordHasher):
        self._repository = repository
        self._hasher = hasher

    async def create(self, name: str, email: str, password: str) -> User:
        """Validate, hash and store a new user."""
        missing = find_missing_fields(name, email, password)
        if missing:
            raise IncompleteInputError(missing)
        name, email = name.strip(), email.strip()

        if not is_password_secure(password):
            raise PasswordPolicyError(MIN_PASSWORD_LENGTH)

        if await self._repository.find_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        try:
            password_hash = await self._hasher.hash(password)
        except Exception as e:
            logger.error(f"Password hashing failed: {e}")
            raise PasswordHashFailedError() from e

        user = await self._repository.create(
            NewUser(name=name, email=email, password_hash=password_hash)
        )
        logger.info(f"Registered user {user.id}")
        return user

    async def find_by_id(self, user_id: str) -> User:
        user = await self._repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def find_by_email(self, email: str) -> User:
        user = await self._repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def list_users(self) -> list[User]:
        return await self._repository.list_all()

    async def update_refresh_token(self, user_id: str, refresh_token: Optional[str]) -> User:
        return await self._repository.update_refresh_token(user_id, refresh_token)
