"""
Authentication module.

Handles registration, credential checks, and JWT session issuance and
validation on top of the identity store.

Public API:
- IAuthService: Interface for auth operations
- AuthService: Implementation over an IUserStore
- AuthConfig: Secret, token lifetime and hash cost
- Request/response models: RegisterRequest, LoginRequest, LoginResponse, UserInfo
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .service import AuthService
from .models import (
    AuthConfig,
    JWTClaims,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserInfo,
)
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    ExpiredTokenError,
    UserExistsError,
    UserNotFoundError,
    InvalidPasswordError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Implementation
    "AuthService",
    # Models
    "AuthConfig",
    "JWTClaims",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "UserInfo",
    # Exceptions
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "ExpiredTokenError",
    "UserExistsError",
    "UserNotFoundError",
    "InvalidPasswordError",
]
