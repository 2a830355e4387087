"""
User-related endpoints.

Read-only views over registered accounts. All routes require
authentication and never expose password hashes or refresh tokens.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_users_service
from shared.models import AuthenticatedUser

from .interfaces import IUsersService
from .models import UserView

router = APIRouter()


@router.get("", response_model=list[UserView])
async def list_users(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUsersService = Depends(get_users_service),
) -> list[UserView]:
    users = await service.list_users()
    return [u.to_view() for u in users]


@router.get("/me", response_model=UserView)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUsersService = Depends(get_users_service),
) -> UserView:
    """
    Get the current user's profile.

    Returns 404 if the account behind a still-valid token is gone.
    """
    found = await service.find_by_id(user.id)
    return found.to_view()


@router.get("/email/{email}", response_model=UserView)
async def get_user_by_email(
    email: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUsersService = Depends(get_users_service),
) -> UserView:
    found = await service.find_by_email(email)
    return found.to_view()


@router.get("/{user_id}", response_model=UserView)
async def get_user(
    user_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUsersService = Depends(get_users_service),
) -> UserView:
    found = await service.find_by_id(str(user_id))
    return found.to_view()
