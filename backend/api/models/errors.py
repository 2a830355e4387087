"""
Error response models.

Standardized error responses for the API.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error envelope returned for every failed request."""

    status: int = Field(..., description="HTTP status code")
    message: str
    code: str = Field(..., description="Stable machine-readable error code")
    details: Optional[dict[str, Any]] = None
    errors: Optional[dict[str, list[str]]] = Field(
        None, description="Validation messages keyed by dotted field path"
    )
    timestamp: datetime
