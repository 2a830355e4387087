"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

import asyncio
from typing import Any, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Off-loop query execution via self._execute
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class QuoteRepository(BaseRepository[Quote]):
            async def find_by_id(self, quote_id: str) -> Optional[Quote]:
                result = await self._execute(
                    self._db.table("quotes").select("*").eq("id", quote_id)
                )
                if not result.data:
                    return None
                return self._map_to_quote(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    async def _execute(self, query: Any) -> Any:
        """
        Run a built query in a worker thread.

        The Supabase client is synchronous, so ``query.execute`` runs via
        ``asyncio.to_thread``.
        """
        return await asyncio.to_thread(query.execute)
