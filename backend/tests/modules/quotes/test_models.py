"""Tests for quotes module models."""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pydantic import ValidationError

from modules.quotes.models import CreateQuoteRequest, Currency, Quote

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_quote(**overrides) -> Quote:
    data = {
        "id": "quote-123",
        "from_currency": Currency.ARS,
        "to_currency": Currency.ETH,
        "amount": Decimal("1000000"),
        "rate": Decimal("0.0000023"),
        "converted_amount": Decimal("2.3"),
        "timestamp": NOW,
        "expires_at": NOW + timedelta(minutes=5),
        "user_id": "user-123",
        "created_at": NOW,
        "updated_at": NOW,
    }
    data.update(overrides)
    return Quote(**data)


class TestCreateQuoteRequest:
    def test_parses_wire_names(self):
        request = CreateQuoteRequest.model_validate({"amount": "1000000", "from": "ARS", "to": "ETH"})
        assert request.amount == Decimal("1000000")
        assert request.from_currency == Currency.ARS
        assert request.to_currency == Currency.ETH

    @pytest.mark.parametrize("amount", ["0", "-5"])
    def test_amount_must_be_positive(self, amount):
        with pytest.raises(ValidationError):
            CreateQuoteRequest.model_validate({"amount": amount, "from": "ARS", "to": "ETH"})

    def test_unknown_currency(self):
        with pytest.raises(ValidationError):
            CreateQuoteRequest.model_validate({"amount": "1", "from": "EUR", "to": "ETH"})


class TestQuote:
    def test_expiry_boundary(self):
        quote = make_quote()
        assert not quote.is_expired(quote.expires_at)
        assert quote.is_expired(quote.expires_at + timedelta(microseconds=1))

    def test_is_deleted(self):
        assert not make_quote().is_deleted
        assert make_quote(deleted_at=NOW).is_deleted

    def test_full_record_serialization(self):
        dumped = make_quote().model_dump(by_alias=True, mode="json")
        assert dumped["from"] == "ARS"
        assert dumped["to"] == "ETH"
        assert dumped["userId"] == "user-123"
        assert dumped["convertedAmount"] == 2.3
        assert dumped["expiresAt"] == "2024-05-01T12:05:00Z"
        assert dumped["deletedAt"] is None

    def test_money_is_numeric_in_json(self):
        quote = make_quote(amount=Decimal("1000000"), converted_amount=Decimal("2.3000000"))
        dumped = quote.to_view().model_dump(by_alias=True, mode="json")
        assert dumped["amount"] == 1000000
        assert isinstance(dumped["amount"], int)
        assert dumped["rate"] == 0.0000023
        assert dumped["convertedAmount"] == 2.3

    def test_money_stays_decimal_in_python(self):
        dumped = make_quote().model_dump()
        assert dumped["converted_amount"] == Decimal("2.3")
        assert isinstance(dumped["rate"], Decimal)

    def test_view_drops_bookkeeping(self):
        dumped = make_quote().to_view().model_dump(by_alias=True)
        assert set(dumped) == {
            "id", "from", "to", "amount", "rate", "convertedAmount", "timestamp", "expiresAt",
        }
