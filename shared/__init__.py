"""
Shared infrastructure for the login-app backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- locks: Reader-writer lock for in-process state
- logging_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .exceptions import (
    LoginAppError,
    NotFoundError,
    ConflictError,
    ValidationError,
    AuthenticationError,
    ConfigurationError,
)
from .locks import ReadWriteLock
from .config import Settings, get_settings
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "LoginAppError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "AuthenticationError",
    "ConfigurationError",
    "ReadWriteLock",
    "setup_logging",
]
