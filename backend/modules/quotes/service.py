"""
Quotes service implementation.

A quote converts an amount at the rate fetched when it is created and is
only visible by id until its expiry instant. States run one way:
active, then expired, then optionally deleted (soft).
"""

import logging
from datetime import timedelta
from decimal import Decimal

from shared.time import utc_now

from .interfaces import IQuotesService, IQuoteRepository, IExchangeRateSource
from .models import Currency, NewQuote, Quote, QuoteView
from .exceptions import (
    ExternalRateUnavailableError,
    QuoteCreationFailedError,
    QuoteNotFoundError,
    SameCurrencyError,
)

logger = logging.getLogger(__name__)

DEFAULT_QUOTE_TTL = timedelta(minutes=5)


class QuotesService(IQuotesService):
    """
    Quotes service with injected repository and rate source.

    Implements IQuotesService protocol.
    """

    def __init__(
        self,
        repository: IQuoteRepository,
        rates: IExchangeRateSource,
        quote_ttl: timedelta = DEFAULT_QUOTE_TTL,
    ):
        self._repository = repository
        self._rates = rates
        self._quote_ttl = quote_ttl

    async def create_quote(
        self,
        from_currency: Currency,
        to_currency: Currency,
        amount: Decimal,
        user_id: str,
    ) -> QuoteView:
        """Fetch the rate, compute the conversion and store the quote."""
        if from_currency == to_currency:
            raise SameCurrencyError(from_currency.value)

        try:
            rate = await self._rates.get_rate(from_currency, to_currency)
        except ExternalRateUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Rate lookup for {from_currency.value}->{to_currency.value} failed unexpectedly: {e}")
            raise QuoteCreationFailedError() from e

        timestamp = utc_now()
        new_quote = NewQuote(
            from_currency=from_currency,
            to_currency=to_currency,
            amount=amount,
            rate=rate,
            converted_amount=amount * rate,
            timestamp=timestamp,
            expires_at=timestamp + self._quote_ttl,
            user_id=user_id,
        )

        try:
            quote = await self._repository.create(new_quote)
        except Exception as e:
            logger.error(f"Failed to store quote for user {user_id}: {e}")
            raise QuoteCreationFailedError() from e

        logger.info(
            f"Created quote {quote.id}: {amount} {from_currency.value} -> "
            f"{quote.converted_amount} {to_currency.value} at {rate}"
        )
        return quote.to_view()

    async def get_quote_by_id(self, quote_id: str) -> QuoteView:
        """
        Get a quote by id.

        Expired quotes raise the same error as missing ones. Any
        authenticated caller may read any quote; ownership is not checked.
        """
        quote = await self._repository.find_by_id(quote_id)
        if quote is None or quote.is_deleted:
            raise QuoteNotFoundError(quote_id)

        if quote.is_expired(utc_now()):
            raise QuoteNotFoundError(quote_id)

        return quote.to_view()

    def get_all_currencies(self) -> list[str]:
        return [currency.value for currency in Currency]

    async def get_user_quotes(self, user_id: str) -> list[Quote]:
        return await self._repository.find_by_user_id(user_id)

    async def delete_quote(self, quote_id: str) -> Quote:
        """Soft delete. Expired quotes can still be deleted."""
        quote = await self._repository.find_by_id(quote_id)
        if quote is None or quote.is_deleted:
            raise QuoteNotFoundError(quote_id)

        deleted = await self._repository.soft_delete(quote_id)
        if deleted is None:
            raise QuoteNotFoundError(quote_id)

        logger.info(f"Soft deleted quote {quote_id}")
        return deleted
