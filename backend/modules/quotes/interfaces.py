"""
Quotes module interfaces.

The API layer depends on IQuotesService; the service depends on
IQuoteRepository and IExchangeRateSource.
"""

from decimal import Decimal
from typing import Protocol, Optional, runtime_checkable

from .models import Currency, NewQuote, Quote, QuoteView


@runtime_checkable
class IExchangeRateSource(Protocol):
    """External source of conversion rates."""

    async def get_rate(self, from_currency: Currency, to_currency: Currency) -> Decimal:
        """
        Get the rate to multiply an amount in from_currency by.

        Raises:
            ExternalRateUnavailableError: If the source fails or the rate is unusable
        """
        ...


@runtime_checkable
class IQuoteRepository(Protocol):
    """Persistence contract for quotes. Soft-deleted rows are never returned."""

    async def create(self, data: NewQuote) -> Quote:
        ...

    async def find_by_id(self, quote_id: str) -> Optional[Quote]:
        ...

    async def find_by_user_id(self, user_id: str) -> list[Quote]:
        ...

    async def soft_delete(self, quote_id: str) -> Optional[Quote]:
        """Mark a quote deleted. Returns None if it was missing or already deleted."""
        ...


@runtime_checkable
class IQuotesService(Protocol):
    """
    Interface for quote operations.

    This protocol defines the contract that the quotes module exposes
    to the API layer.
    """

    async def create_quote(
        self,
        from_currency: Currency,
        to_currency: Currency,
        amount: Decimal,
        user_id: str,
    ) -> QuoteView:
        """
        Fetch a rate and store a quote that expires after the quote window.

        Args:
            from_currency: Source currency
            to_currency: Target currency
            amount: Positive amount in the source currency
            user_id: Owner of the new quote

        Returns:
            The stored quote without ownership fields

        Raises:
            SameCurrencyError: If from and to are equal (no rate lookup is made)
            ExternalRateUnavailableError: If the rate cannot be fetched
            QuoteCreationFailedError: For any other failure
        """
        ...

    async def get_quote_by_id(self, quote_id: str) -> QuoteView:
        """
        Get a quote that is still valid.

        Raises:
            QuoteNotFoundError: If missing, deleted or expired
        """
        ...

    def get_all_currencies(self) -> list[str]:
        """Return supported currency codes in declaration order."""
        ...

    async def get_user_quotes(self, user_id: str) -> list[Quote]:
        """Return all of a user's quotes, expired ones included."""
        ...

    async def delete_quote(self, quote_id: str) -> Quote:
        """
        Soft delete a quote.

        Raises:
            QuoteNotFoundError: If missing or already deleted
        """
        ...
