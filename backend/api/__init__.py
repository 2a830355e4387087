"""
QuoteDesk API package.

Provides the FastAPI application for the QuoteDesk authentication and
quote service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
