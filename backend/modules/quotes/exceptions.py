"""
Quotes module exceptions.
"""

from shared.exceptions import (
    QuoteDeskError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class QuoteError(QuoteDeskError):
    """Base exception for quote-related errors."""

    pass


class SameCurrencyError(ValidationError):
    """Raised when the source and target currency are the same."""

    def __init__(self, currency: str):
        super().__init__(
            f"Cannot convert from {currency} to {currency}. Currencies must differ",
            code="SAME_CURRENCY",
            details={"currency": currency},
        )


class QuoteNotFoundError(NotFoundError):
    """Raised when a quote is missing, expired or deleted."""

    def __init__(self, quote_id: str):
        super().__init__(
            f"Quote not found: {quote_id}",
            code="QUOTE_NOT_FOUND",
            details={"quote_id": quote_id},
        )


class ExternalRateUnavailableError(ExternalServiceError):
    """
    Raised when the market API fails or returns an unusable rate.

    ``reason`` is a short fixed code such as ``http_error`` or
    ``non_numeric_price``; upstream error text is logged, never attached.
    """

    def __init__(self, reason: str):
        super().__init__(
            "Failed to fetch the exchange rate from the market API",
            service="crypto_market",
            code="EXTERNAL_RATE_UNAVAILABLE",
            details={"reason": reason},
        )


class QuoteCreationFailedError(QuoteError):
    """Raised when a quote cannot be stored."""

    def __init__(self):
        super().__init__(
            "An error occurred while creating the quote",
            code="QUOTE_CREATION_FAILED",
        )
