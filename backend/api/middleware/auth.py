"""
Bearer authentication dependency.

Validates access tokens issued by the auth module and extracts the
caller's identity.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import ITokenIssuer
from shared.models import AuthenticatedUser
from ..dependencies import get_token_issuer

# Bearer token extractor; missing headers are reported by get_current_user
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: ITokenIssuer = Depends(get_token_issuer),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Raises:
        MissingTokenError: No bearer credentials were sent
        InvalidTokenError: The token is malformed, tampered or expired

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    payload = await tokens.verify(credentials.credentials)
    return AuthenticatedUser(id=payload.sub, email=payload.email)

