"""
JWT creation and verification for access and refresh tokens.

Both tokens carry the same claims (sub, email) and are signed with the
same secret; only the lifetime differs. Every token gets a random jti so
two tokens minted in the same second are still distinct.
"""

import logging
from datetime import timedelta
from uuid import uuid4

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.time import utc_now
from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    TokenGenerationFailedError,
)
from .interfaces import ITokenIssuer
from .models import TokenPair, TokenPayload

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_TTL = timedelta(minutes=20)
DEFAULT_REFRESH_TTL = timedelta(days=7)
REQUIRED_CLAIMS = ["sub", "email", "exp", "iat", "jti"]


class JWTTokenIssuer(ITokenIssuer):
    """HS256 token issuer built on PyJWT."""

    def __init__(
        self,
        secret: str,
        access_ttl: timedelta = DEFAULT_ACCESS_TTL,
        refresh_ttl: timedelta = DEFAULT_REFRESH_TTL,
        algorithm: str = "HS256",
    ):
        self._secret = secret
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl
        self._algorithm = algorithm

    async def issue(self, user_id: str, email: str) -> TokenPair:
        if not self._secret:
            logger.error("JWT secret is not configured; cannot sign tokens")
            raise TokenGenerationFailedError()

        try:
            return TokenPair(
                access_token=self._sign(user_id, email, self._access_ttl),
                refresh_token=self._sign(user_id, email, self._refresh_ttl),
            )
        except jwt.PyJWTError as e:
            logger.error(f"Token signing failed: {e}")
            raise TokenGenerationFailedError() from e

    async def verify(self, token: str) -> TokenPayload:
        if not self._secret:
            raise InvalidTokenError("Server authentication not configured")

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            return TokenPayload(**claims)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError:
            raise InvalidTokenError()
        except PydanticValidationError:
            raise InvalidTokenError()

    def _sign(self, user_id: str, email: str, ttl: timedelta) -> str:
        now = utc_now()
        payload = {
            "sub": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            "jti": str(uuid4()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)
