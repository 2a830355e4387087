"""
Users module.

Holds the credential store and user account rules.

Public API:
- IUsersService: Interface for user account operations
- IUserRepository: Interface for the credential store
- User, PublicUser, UserView: User models
- Users exceptions: UserAlreadyExistsError, PasswordPolicyError, etc.
"""

from .interfaces import IUsersService, IUserRepository
from .models import User, NewUser, PublicUser, UserView
from .exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
    IncompleteInputError,
    PasswordPolicyError,
    PasswordHashFailedError,
)

__all__ = [
    # Interfaces
    "IUsersService",
    "IUserRepository",
    # Models
    "User",
    "NewUser",
    "PublicUser",
    "UserView",
    # Exceptions
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "IncompleteInputError",
    "PasswordPolicyError",
    "PasswordHashFailedError",
]
