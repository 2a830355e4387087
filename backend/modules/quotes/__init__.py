"""
Quotes module.

Creates time-boxed currency conversion quotes from live market rates.

Public API:
- IQuotesService: Interface for quote operations
- IQuoteRepository, IExchangeRateSource: Collaborator interfaces
- Quote, QuoteView, Currency: Quote models
- Quotes exceptions: SameCurrencyError, QuoteNotFoundError, etc.
"""

from .interfaces import IQuotesService, IQuoteRepository, IExchangeRateSource
from .models import Currency, CreateQuoteRequest, NewQuote, Quote, QuoteView
from .exceptions import (
    QuoteError,
    SameCurrencyError,
    QuoteNotFoundError,
    ExternalRateUnavailableError,
    QuoteCreationFailedError,
)

__all__ = [
    # Interfaces
    "IQuotesService",
    "IQuoteRepository",
    "IExchangeRateSource",
    # Models
    "Currency",
    "CreateQuoteRequest",
    "NewQuote",
    "Quote",
    "QuoteView",
    # Exceptions
    "QuoteError",
    "SameCurrencyError",
    "QuoteNotFoundError",
    "ExternalRateUnavailableError",
    "QuoteCreationFailedError",
]
