"""
Aimo Pulse API package.

Provides the FastAPI application for the couples mood-sharing service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
