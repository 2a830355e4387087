"""
Users module interfaces.

IUserRepository is the credential store: the auth module and the users
service depend on it, never on the Supabase adapter directly.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import User, NewUser


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence contract for user records."""

    async def find_by_email(self, email: str) -> Optional[User]:
        """Return the user with this exact email, or None."""
        ...

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this id, or None."""
        ...

    async def create(self, data: NewUser) -> User:
        """
        Insert a new user.

        Raises:
            UserAlreadyExistsError: If the email is already taken
        """
        ...

    async def update_refresh_token(self, user_id: str, refresh_token: Optional[str]) -> User:
        """Overwrite the stored refresh token and return the updated user."""
        ...

    async def list_all(self) -> list[User]:
        """Return every user record."""
        ...


@runtime_checkable
class IUsersService(Protocol):
    """
    Interface for user account operations.

    This protocol defines the contract that the users module exposes
    to the auth module and the API layer.
    """

    async def create(self, name: str, email: str, password: str) -> User:
        """
        Register a new user.

        Args:
            name: Display name
            email: Email address (must be unique)
            password: Plain-text password, checked against the password policy

        Returns:
            The stored user

        Raises:
            IncompleteInputError: If any field is blank
            PasswordPolicyError: If the password is too weak
            UserAlreadyExistsError: If the email is already registered
            PasswordHashFailedError: If hashing fails
        """
        ...

    async def find_by_id(self, user_id: str) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...

    async def find_by_email(self, email: str) -> User:
        """
        Get a user by email.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...

    async def list_users(self) -> list[User]:
        """Return all users."""
        ...

    async def update_refresh_token(self, user_id: str, refresh_token: Optional[str]) -> User:
        """Record the refresh token currently issued to a user."""
        ...
