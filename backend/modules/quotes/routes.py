"""
Quote API endpoints.

Every route except the currency list requires a bearer access token.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_quotes_service
from shared.models import AuthenticatedUser

from .interfaces import IQuotesService
from .models import CreateQuoteRequest, Quote, QuoteView

router = APIRouter()


@router.post("", response_model=QuoteView, status_code=201)
async def create_quote(
    request: CreateQuoteRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IQuotesService = Depends(get_quotes_service),
) -> QuoteView:
    """
    Create a quote at the current market rate.

    The quote can be fetched by id for five minutes.
    """
    return await service.create_quote(
        request.from_currency,
        request.to_currency,
        request.amount,
        user.id,
    )


@router.get("/currencies/all", response_model=list[str])
async def get_all_currencies(
    service: IQuotesService = Depends(get_quotes_service),
) -> list[str]:
    """List supported currency codes."""
    return service.get_all_currencies()


@router.get("/user/all", response_model=list[Quote])
async def get_user_quotes(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IQuotesService = Depends(get_quotes_service),
) -> list[Quote]:
    """
    List the current user's quotes, expired ones included.
    """
    return await service.get_user_quotes(user.id)


@router.get("/{quote_id}", response_model=QuoteView)
async def get_quote(
    quote_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IQuotesService = Depends(get_quotes_service),
) -> QuoteView:
    return await service.get_quote_by_id(str(quote_id))


@router.delete("/{quote_id}", response_model=Quote)
async def delete_quote(
    quote_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IQuotesService = Depends(get_quotes_service),
) -> Quote:
    """
    Soft delete a quote and return the deleted record.
    """
    return await service.delete_quote(str(quote_id))
