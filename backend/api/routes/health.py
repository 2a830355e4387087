"""
Health check endpoints.

Provides the root greeting and a liveness probe.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class RootResponse(BaseModel):
    """Root greeting response model."""

    message: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


@router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    return RootResponse(message="Hello World!")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)
