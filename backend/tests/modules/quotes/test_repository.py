"""Tests for the Supabase quote repository."""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from modules.quotes.models import Currency, NewQuote
from modules.quotes.repository import SupabaseQuoteRepository

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def create_mock_quote_row(
    quote_id: str = "quote-123",
    user_id: str = "user-123",
    deleted_at: str | None = None,
) -> dict:
    """Helper to create a quotes table row as PostgREST returns it."""
    return {
        "id": quote_id,
        "from_currency": "ARS",
        "to_currency": "ETH",
        "amount": 1000000,
        "rate": 2.3e-06,
        "converted_amount": "2.3000000",
        "timestamp": "2024-05-01T12:00:00",
        "expires_at": "2024-05-01T12:05:00+00:00",
        "user_id": user_id,
        "created_at": NOW.isoformat(),
        "updated_at": NOW.isoformat(),
        "deleted_at": deleted_at,
    }


def make_new_quote() -> NewQuote:
    return NewQuote(
        from_currency=Currency.ARS,
        to_currency=Currency.ETH,
        amount=Decimal("1000000"),
        rate=Decimal("0.0000023"),
        converted_amount=Decimal("2.3000000"),
        timestamp=NOW,
        expires_at=NOW + timedelta(minutes=5),
        user_id="user-123",
    )


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repository(mock_db):
    return SupabaseQuoteRepository(mock_db)


class TestCreate:
    @pytest.mark.asyncio
    async def test_inserts_money_as_strings(self, repository, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_quote_row()
        ]

        quote = await repository.create(make_new_quote())

        mock_db.table.assert_called_with("quotes")
        row = mock_db.table.return_value.insert.call_args[0][0]
        assert row["amount"] == "1000000"
        assert row["rate"] == "0.0000023"
        assert row["converted_amount"] == "2.3000000"
        assert row["from_currency"] == "ARS"
        assert row["expires_at"] == "2024-05-01T12:05:00+00:00"
        assert quote.id == "quote-123"


class TestMapping:
    @pytest.mark.asyncio
    async def test_maps_numbers_to_decimal_and_times_to_utc(self, repository, mock_db):
        query = (
            mock_db.table.return_value.select.return_value.eq.return_value
            .is_.return_value.limit.return_value
        )
        query.execute.return_value.data = [create_mock_quote_row()]

        quote = await repository.find_by_id("quote-123")

        assert quote.amount == Decimal("1000000")
        assert quote.rate == Decimal("0.0000023")
        assert quote.converted_amount == Decimal("2.3")
        assert quote.from_currency == Currency.ARS
        assert quote.timestamp == NOW
        assert quote.timestamp.tzinfo is not None
        assert quote.expires_at == NOW + timedelta(minutes=5)


class TestFind:
    @pytest.mark.asyncio
    async def test_find_by_id_excludes_deleted(self, repository, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.is_.return_value.limit.return_value.execute.return_value.data = []

        assert await repository.find_by_id("quote-123") is None
        select.eq.assert_called_once_with("id", "quote-123")
        select.eq.return_value.is_.assert_called_once_with("deleted_at", "null")

    @pytest.mark.asyncio
    async def test_find_by_user_id(self, repository, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.is_.return_value.execute.return_value.data = [
            create_mock_quote_row("q1"),
            create_mock_quote_row("q2"),
        ]

        quotes = await repository.find_by_user_id("user-123")

        select.eq.assert_called_once_with("user_id", "user-123")
        select.eq.return_value.is_.assert_called_once_with("deleted_at", "null")
        assert [q.id for q in quotes] == ["q1", "q2"]


class TestSoftDelete:
    @pytest.mark.asyncio
    async def test_sets_deleted_at(self, repository, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.is_.return_value.execute.return_value.data = [
            create_mock_quote_row(deleted_at=NOW.isoformat())
        ]

        quote = await repository.soft_delete("quote-123")

        values = update.call_args[0][0]
        assert values["deleted_at"] == values["updated_at"]
        update.return_value.eq.assert_called_once_with("id", "quote-123")
        update.return_value.eq.return_value.is_.assert_called_once_with("deleted_at", "null")
        assert quote.is_deleted

    @pytest.mark.asyncio
    async def test_already_deleted(self, repository, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.is_.return_value.execute.return_value.data = []

        assert await repository.soft_delete("quote-123") is None
