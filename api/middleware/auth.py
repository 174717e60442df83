"""
JWT Authentication middleware.

Extracts the bearer token from the Authorization header and hands it to
the auth service for validation. Rejections propagate as auth module
exceptions and are turned into 401 responses by the error handlers.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from modules.auth.interfaces import IAuthService
from modules.auth.models import UserInfo

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: IAuthService = Depends(get_auth_service),
) -> UserInfo:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        def protected_route(user: UserInfo = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError("Authorization header required")

    return service.validate_token(credentials.credentials)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: IAuthService = Depends(get_auth_service),
) -> Optional[UserInfo]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication.
    """
    if credentials is None:
        return None

    try:
        return service.validate_token(credentials.credentials)
    except (ExpiredTokenError, InvalidTokenError):
        return None
