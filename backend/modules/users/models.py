"""
Users module data models.

``User`` is the stored record and carries the password hash and the
current refresh token, so it must never be returned from a route.
Routes use ``UserView`` or ``PublicUser`` instead.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import CamelModel


class User(BaseModel):
    """A registered user as held by the credential store."""

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., description="Salted one-way password hash")
    refresh_token: Optional[str] = Field(
        None,
        description="Last issued refresh token; the only one accepted on refresh",
    )
    created_at: datetime = Field(..., description="Registration time")
    updated_at: datetime = Field(..., description="Last update time")

    def to_public(self) -> "PublicUser":
        return PublicUser(id=self.id, email=self.email, name=self.name)

    def to_view(self) -> "UserView":
        return UserView(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class NewUser(BaseModel):
    """Fields needed to insert a user. The password is already hashed."""

    name: str
    email: str
    password_hash: str


class PublicUser(CamelModel):
    """User identity returned alongside issued tokens."""

    id: str
    email: str
    name: str


class UserView(CamelModel):
    """User record as exposed by the users endpoints."""

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
