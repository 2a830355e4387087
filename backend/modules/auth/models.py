"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, EmailStr, Field

from shared.models import CamelModel
from modules.users.models import PublicUser


class TokenPayload(BaseModel):
    """Decoded claims of an access or refresh token."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email at issue time")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    jti: str = Field(..., description="Unique token ID")


class TokenPair(BaseModel):
    """Freshly signed access and refresh tokens."""

    access_token: str
    refresh_token: str


class AuthTokens(CamelModel):
    """Response for register, login and refresh."""

    access_token: str = Field(..., description="Short-lived bearer token")
    refresh_token: str = Field(..., description="Long-lived token for /auth/refresh")
    user: PublicUser


class RegisterRequest(CamelModel):
    """Registration body. Blank fields are rejected by the users service."""

    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="At least 8 characters with one special character")


class LoginRequest(CamelModel):
    """Login body."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(CamelModel):
    """Refresh body."""

    refresh_token: str = Field(..., min_length=1)
