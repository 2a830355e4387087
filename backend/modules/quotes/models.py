"""
Quotes module data models.

Money values are Decimal end to end so the converted amount is exact for
the rates the market API reports as decimal strings. On the wire they are
plain JSON numbers.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from shared.models import CamelModel


def _decimal_to_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Decimal in Python, number in JSON responses
Money = Annotated[Decimal, PlainSerializer(_decimal_to_number, when_used="json")]


class Currency(str, Enum):
    """Supported currencies, in the order they are listed to clients."""

    ARS = "ARS"
    ETH = "ETH"
    BTC = "BTC"
    USDT = "USDT"
    XEM = "XEM"
    CLP = "CLP"
    SHIB = "SHIB"
    DOGE = "DOGE"


class CreateQuoteRequest(CamelModel):
    """Request to create a new quote."""

    amount: Decimal = Field(..., gt=0, description="Amount to convert")
    from_currency: Currency = Field(..., alias="from", description="Source currency")
    to_currency: Currency = Field(..., alias="to", description="Target currency")


class NewQuote(BaseModel):
    """Fields needed to insert a quote."""

    from_currency: Currency
    to_currency: Currency
    amount: Decimal
    rate: Decimal
    converted_amount: Decimal
    timestamp: datetime
    expires_at: datetime
    user_id: str


class QuoteView(CamelModel):
    """Quote as returned from create and get-by-id; omits ownership and bookkeeping."""

    id: str = Field(..., description="Quote ID (UUID)")
    from_currency: Currency = Field(..., alias="from")
    to_currency: Currency = Field(..., alias="to")
    amount: Money
    rate: Money
    converted_amount: Money
    timestamp: datetime = Field(..., description="When the rate was fetched")
    expires_at: datetime = Field(..., description="Quote is not found after this instant")


class Quote(QuoteView):
    """Full quote record."""

    user_id: str = Field(..., description="Owner user ID")
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = Field(None, description="Soft delete marker")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_expired(self, now: datetime) -> bool:
        """A quote is valid up to and including expires_at."""
        return now > self.expires_at

    def to_view(self) -> QuoteView:
        return QuoteView(
            id=self.id,
            from_currency=self.from_currency,
            to_currency=self.to_currency,
            amount=self.amount,
            rate=self.rate,
            converted_amount=self.converted_amount,
            timestamp=self.timestamp,
            expires_at=self.expires_at,
        )


class RatePriceData(BaseModel):
    """One entry of the market API response, keyed by currency code."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    currency: Optional[str] = None
    price: Optional[str] = None
    timestamp: Optional[str] = None
