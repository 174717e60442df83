"""
Authentication endpoints.

Registration, login, logout and the current user's profile. Handlers are
plain functions so FastAPI runs them on its thread pool; bcrypt hashing
never blocks the event loop.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from modules.auth.interfaces import IAuthService
from modules.auth.models import LoginRequest, LoginResponse, RegisterRequest, UserInfo

from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user, get_optional_user
from ..models.responses import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=SuccessResponse[LoginResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SuccessResponse[LoginResponse]:
    """
    Create an account and return a session token for it.

    Returns 409 if the email or username is already taken.
    """
    result = service.register(request)
    return SuccessResponse(message="User registered successfully", data=result)


@router.post("/login", response_model=SuccessResponse[LoginResponse])
def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SuccessResponse[LoginResponse]:
    """
    Exchange email and password for a session token.

    Returns 401 with the same message whichever credential was wrong.
    """
    result = service.login(request)
    return SuccessResponse(message="Login successful", data=result)


@router.post("/logout", response_model=SuccessResponse[None])
def logout(
    user: Optional[UserInfo] = Depends(get_optional_user),
) -> SuccessResponse[None]:
    """
    Log out.

    Tokens are stateless, so the client simply discards its token.
    """
    if user is not None:
        logger.debug("User %s logged out", user.id)
    return SuccessResponse(message="Logout successful")


@router.get("/profile", response_model=SuccessResponse[UserInfo])
def profile(
    user: UserInfo = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> SuccessResponse[UserInfo]:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return SuccessResponse(
        message="Profile retrieved successfully",
        data=service.get_profile(user.id),
    )
