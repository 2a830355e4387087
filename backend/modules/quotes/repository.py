"""
Quote repository for database access.

Encapsulates all Supabase queries and data mapping for the ``quotes`` table.

Note: This repository does NOT perform ownership or expiry checks.
The service layer is responsible for those rules.
"""

from decimal import Decimal
from typing import Optional, Any

from shared.repository import BaseRepository
from shared.time import ensure_utc, utc_now
from .models import Currency, NewQuote, Quote

QUOTES_TABLE = "quotes"


class SupabaseQuoteRepository(BaseRepository[Quote]):
    """
    Repository for quote data access.

    Implements IQuoteRepository. Rows with ``deleted_at`` set are filtered
    out of every read.
    """

    async def create(self, data: NewQuote) -> Quote:
        row = {
            "from_currency": data.from_currency.value,
            "to_currency": data.to_currency.value,
            # numeric columns take strings to keep full Decimal precision
            "amount": str(data.amount),
            "rate": str(data.rate),
            "converted_amount": str(data.converted_amount),
            "timestamp": data.timestamp.isoformat(),
            "expires_at": data.expires_at.isoformat(),
            "user_id": data.user_id,
        }
        result = await self._execute(self._db.table(QUOTES_TABLE).insert(row))
        return self._map_to_quote(result.data[0])

    async def find_by_id(self, quote_id: str) -> Optional[Quote]:
        result = await self._execute(
            self._db.table(QUOTES_TABLE)
            .select("*")
            .eq("id", quote_id)
            .is_("deleted_at", "null")
            .limit(1)
        )
        if not result.data:
            return None
        return self._map_to_quote(result.data[0])

    async def find_by_user_id(self, user_id: str) -> list[Quote]:
        result = await self._execute(
            self._db.table(QUOTES_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .is_("deleted_at", "null")
        )
        return [self._map_to_quote(row) for row in result.data]

    async def soft_delete(self, quote_id: str) -> Optional[Quote]:
        now = utc_now().isoformat()
        update: dict[str, Any] = {"deleted_at": now, "updated_at": now}
        result = await self._execute(
            self._db.table(QUOTES_TABLE)
            .update(update)
            .eq("id", quote_id)
            .is_("deleted_at", "null")
        )
        if not result.data:
            return None
        return self._map_to_quote(result.data[0])

    def _map_to_quote(self, data: dict) -> Quote:
        """Map database row to Quote model."""
        quote = Quote(
            id=str(data["id"]),
            from_currency=Currency(data["from_currency"]),
            to_currency=Currency(data["to_currency"]),
            amount=Decimal(str(data["amount"])),
            rate=Decimal(str(data["rate"])),
            converted_amount=Decimal(str(data["converted_amount"])),
            timestamp=data["timestamp"],
            expires_at=data["expires_at"],
            user_id=str(data["user_id"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            deleted_at=data.get("deleted_at"),
        )
        return quote.model_copy(
            update={
                "timestamp": ensure_utc(quote.timestamp),
                "expires_at": ensure_utc(quote.expires_at),
            }
        )
