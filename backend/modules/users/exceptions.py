"""
Users module exceptions.

These exceptions are raised by the users module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    QuoteDeskError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class UserAlreadyExistsError(ConflictError):
    """Raised when registering an email that is already on file."""

    def __init__(self, email: str):
        super().__init__(
            f"User with email {email} already exists",
            code="USER_ALREADY_EXISTS",
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """Raised when a user lookup by id or email finds nothing."""

    def __init__(self, identifier: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"identifier": identifier},
        )


class IncompleteInputError(ValidationError):
    """Raised when required registration fields are blank."""

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            f"Missing required fields: {', '.join(missing_fields)}",
            code="INCOMPLETE_INPUT",
            details={"missing_fields": missing_fields},
        )


class PasswordPolicyError(ValidationError):
    """Raised when a password is too short or lacks a special character."""

    def __init__(self, min_length: int):
        super().__init__(
            "Password is not secure enough",
            code="PASSWORD_POLICY_VIOLATION",
            details={
                "requirements": (
                    f"at least {min_length} characters and "
                    "at least one special character"
                ),
            },
        )


class PasswordHashFailedError(QuoteDeskError):
    """Raised when the password hasher itself fails."""

    def __init__(self):
        super().__init__(
            "Failed to process password",
            code="PASSWORD_HASH_FAILED",
        )
