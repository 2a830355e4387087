"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
"""

from typing import Optional, Any

from supabase import PostgrestAPIError

from shared.repository import BaseRepository
from shared.time import utc_now
from .models import User, NewUser
from .exceptions import UserAlreadyExistsError, UserNotFoundError

USERS_TABLE = "users"
UNIQUE_VIOLATION = "23505"


class SupabaseUserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Implements IUserRepository. All methods return User models mapped
    from database rows.
    """

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self._execute(
            self._db.table(USERS_TABLE).select("*").eq("email", email).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def find_by_id(self, user_id: str) -> Optional[User]:
        result = await self._execute(
            self._db.table(USERS_TABLE).select("*").eq("id", user_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def create(self, data: NewUser) -> User:
        """
        Insert a user row.

        The unique index on email is the final guard against two
        registrations racing past the service-level duplicate check.
        """
        try:
            result = await self._execute(
                self._db.table(USERS_TABLE).insert(data.model_dump())
            )
        except PostgrestAPIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise UserAlreadyExistsError(data.email) from e
            raise
        return self._map_to_user(result.data[0])

    async def update_refresh_token(self, user_id: str, refresh_token: Optional[str]) -> User:
        update: dict[str, Any] = {
            "refresh_token": refresh_token,
            "updated_at": utc_now().isoformat(),
        }
        result = await self._execute(
            self._db.table(USERS_TABLE).update(update).eq("id", user_id)
        )
        if not result.data:
            raise UserNotFoundError(user_id)
        return self._map_to_user(result.data[0])

    async def list_all(self) -> list[User]:
        result = await self._execute(
            self._db.table(USERS_TABLE).select("*").order("created_at")
        )
        return [self._map_to_user(row) for row in result.data]

    def _map_to_user(self, data: dict) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["password_hash"],
            refresh_token=data.get("refresh_token"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
