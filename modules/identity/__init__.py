"""
Identity module.

In-memory user records with unique email and username indexes.

Public API:
- IUserStore: Interface for user storage
- InMemoryUserStore: Thread-safe in-memory implementation
- User: Stored user record
- Identity exceptions: UserNotFoundError, UserAlreadyExistsError
"""

from .interfaces import IUserStore
from .models import User
from .store import InMemoryUserStore
from .exceptions import UserNotFoundError, UserAlreadyExistsError

__all__ = [
    # Interface
    "IUserStore",
    # Implementation
    "InMemoryUserStore",
    # Models
    "User",
    # Exceptions
    "UserNotFoundError",
    "UserAlreadyExistsError",
]
