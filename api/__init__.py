"""
login-app API package.

Provides the FastAPI application for the login-app authentication service.
"""

from .app import create_app

__all__ = ["create_app"]
