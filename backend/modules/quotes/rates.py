"""
Exchange rate source backed by the crypto market HTTP API.

The API is queried as ``GET {base_url}?from=ARS&to=ETH`` and answers with
an object keyed by the source currency:

    {"ARS": {"currency": "ETH", "price": "0.0000023", "timestamp": "..."}}

Each lookup is a single attempt; failures are not retried.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from .interfaces import IExchangeRateSource
from .models import Currency, RatePriceData
from .exceptions import ExternalRateUnavailableError

logger = logging.getLogger(__name__)


class CryptoMarketRateSource(IExchangeRateSource):
    """
    IExchangeRateSource over httpx.

    A client can be injected for connection reuse or testing; otherwise a
    short-lived AsyncClient is opened per lookup.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    async def get_rate(self, from_currency: Currency, to_currency: Currency) -> Decimal:
        if not self._base_url:
            logger.warning("Market API URL is not configured")
            raise ExternalRateUnavailableError("not_configured")

        data = await self._fetch(from_currency, to_currency)
        return self._parse_rate(data, from_currency)

    async def _fetch(self, from_currency: Currency, to_currency: Currency) -> dict:
        params = {"from": from_currency.value, "to": to_currency.value}
        try:
            if self._client is not None:
                response = await self._client.get(
                    self._base_url, params=params, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(
                        self._base_url, params=params, timeout=self._timeout
                    )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.warning(f"Market API request failed for {from_currency.value}->{to_currency.value}: {e}")
            raise ExternalRateUnavailableError("http_error") from e
        except ValueError as e:
            logger.warning(f"Market API returned invalid JSON: {e}")
            raise ExternalRateUnavailableError("invalid_json") from e

        if not isinstance(data, dict):
            logger.warning(f"Market API returned a {type(data).__name__}, expected an object")
            raise ExternalRateUnavailableError("unexpected_shape")
        return data

    def _parse_rate(self, data: dict, from_currency: Currency) -> Decimal:
        """Extract the price for the source currency as a finite Decimal."""
        entry = data.get(from_currency.value)
        if not isinstance(entry, dict):
            logger.warning(f"Market API response has no entry for {from_currency.value}")
            raise ExternalRateUnavailableError("missing_price")

        try:
            price_data = RatePriceData(**entry)
        except PydanticValidationError as e:
            logger.warning(f"Market API price entry is malformed: {e}")
            raise ExternalRateUnavailableError("malformed_price") from e

        if not price_data.price:
            logger.warning(f"Market API entry for {from_currency.value} has no price")
            raise ExternalRateUnavailableError("missing_price")

        try:
            rate = Decimal(price_data.price.strip())
        except InvalidOperation as e:
            logger.warning(f"Market API price is not numeric: {price_data.price!r}")
            raise ExternalRateUnavailableError("non_numeric_price") from e

        if not rate.is_finite():
            logger.warning(f"Market API price is not finite: {price_data.price!r}")
            raise ExternalRateUnavailableError("non_numeric_price")
        return rate
