"""
Authentication service implementation.

Registration, login and refresh-token rotation. Each user has exactly
one live refresh token: the value stored on the user record. Issuing a
new pair overwrites it, which invalidates every earlier refresh token.

Two concurrent refreshes for the same user can both pass the stored-token
comparison before either write lands; the last write wins. The store does
not offer compare-and-swap, so this is accepted rather than prevented.
"""

import logging

from modules.users.interfaces import IUsersService
from modules.users.models import User
from modules.users.exceptions import (
    IncompleteInputError,
    PasswordPolicyError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

from .interfaces import IAuthService, IPasswordHasher, ITokenIssuer
from .models import AuthTokens
from .exceptions import (
    AuthenticationFailedError,
    InvalidTokenError,
    TokenGenerationFailedError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# Errors from user creation that reach the client unchanged
REGISTRATION_ERRORS = (
    IncompleteInputError,
    PasswordPolicyError,
    UserAlreadyExistsError,
    TokenGenerationFailedError,
)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Collaborators are injected: the users service (credential store and
    registration rules), a password hasher and a token issuer.
    """

    def __init__(
        self,
        users: IUsersService,
        hasher: IPasswordHasher,
        tokens: ITokenIssuer,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, name: str, email: str, password: str) -> AuthTokens:
        """Create the user, then sign them in."""
        try:
            user = await self._users.create(name, email, password)
            return await self._issue_tokens(user)
        except REGISTRATION_ERRORS:
            raise
        except Exception as e:
            logger.error(f"Registration failed: {e}")
            raise AuthenticationFailedError(reason="registration_failed") from e

    async def login(self, email: str, password: str) -> AuthTokens:
        """
        Verify credentials and issue a fresh token pair.

        Unknown email and wrong password raise the same error; only the
        logged reason differs.
        """
        try:
            user = await self._users.find_by_email(email)
        except UserNotFoundError:
            raise self._login_failed("unknown_email")
        except Exception as e:
            logger.error(f"User lookup failed during login: {e}")
            raise self._login_failed("lookup_failed") from e

        try:
            matches = await self._hasher.verify(password, user.password_hash)
        except Exception as e:
            logger.error(f"Password verification failed for user {user.id}: {e}")
            raise self._login_failed("verify_failed", user.id) from e

        if not matches:
            raise self._login_failed("wrong_password", user.id)

        return await self._issue_tokens(user)

    async def refresh_tokens(self, refresh_token: str) -> AuthTokens:
        """
        Rotate the refresh token.

        The presented token must verify, belong to an existing user whose
        email is unchanged, and equal the token currently stored for that
        user.
        """
        try:
            payload = await self._tokens.verify(refresh_token)
        except InvalidTokenError:
            raise InvalidTokenError()
        except Exception as e:
            logger.error(f"Token verification failed unexpectedly: {e}")
            raise InvalidTokenError() from e

        try:
            user = await self._users.find_by_id(payload.sub)
        except UserNotFoundError:
            raise InvalidTokenError()
        except Exception as e:
            logger.error(f"User lookup failed during refresh: {e}")
            raise UnauthorizedError() from e

        if user.email != payload.email:
            logger.info(f"Refresh rejected for user {user.id}: email changed since issue")
            raise InvalidTokenError()

        if user.refresh_token != refresh_token:
            logger.info(f"Refresh rejected for user {user.id}: token superseded")
            raise InvalidTokenError()

        return await self._issue_tokens(user)

    async def _issue_tokens(self, user: User) -> AuthTokens:
        """
        Sign a new pair and record the refresh token on the user.

        Tokens are only returned once the refresh token is stored;
        otherwise the next refresh would be rejected.
        """
        try:
            pair = await self._tokens.issue(user.id, user.email)
        except TokenGenerationFailedError:
            raise
        except Exception as e:
            logger.error(f"Token signing failed for user {user.id}: {e}")
            raise TokenGenerationFailedError() from e

        try:
            await self._users.update_refresh_token(user.id, pair.refresh_token)
        except Exception as e:
            logger.error(f"Failed to store refresh token for user {user.id}: {e}")
            raise TokenGenerationFailedError() from e

        return AuthTokens(
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            user=user.to_public(),
        )

    def _login_failed(self, reason: str, user_id: str | None = None) -> AuthenticationFailedError:
        if user_id:
            logger.info(f"Login failed for user {user_id}: {reason}")
        else:
            logger.info(f"Login failed: {reason}")
        return AuthenticationFailedError(reason=reason)
