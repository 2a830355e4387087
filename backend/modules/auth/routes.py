"""
Authentication API endpoints.

Register, login and refresh all answer with a fresh token pair and the
public user identity. None of them require a bearer token.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import AuthTokens, LoginRequest, RefreshRequest, RegisterRequest

router = APIRouter()


@router.post("/register", response_model=AuthTokens, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthTokens:
    """
    Create an account and sign in.

    Passwords need at least 8 characters and one special character.
    """
    return await service.register(request.name, str(request.email), request.password)


@router.post("/login", response_model=AuthTokens)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthTokens:
    """
    Sign in with email and password.

    Any previously issued refresh token stops working.
    """
    return await service.login(str(request.email), request.password)


@router.post("/refresh", response_model=AuthTokens)
async def refresh(
    request: RefreshRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthTokens:
    """Exchange the current refresh token for a new pair."""
    return await service.refresh_tokens(request.refresh_token)
