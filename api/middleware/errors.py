"""
Exception handlers.

Maps module exceptions to HTTP responses in the ErrorResponse format.
Services raise typed errors; this is the only place they become status codes.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    LoginAppError,
    NotFoundError,
    ValidationError,
)

from ..models.errors import ErrorResponse

logger = logging.getLogger(__name__)


# Most specific first; the message replaces the exception's own when set
ERROR_MAP: list[tuple[type[LoginAppError], int, Optional[str]]] = [
    (MissingTokenError, status.HTTP_401_UNAUTHORIZED, None),
    (ExpiredTokenError, status.HTTP_401_UNAUTHORIZED, "Token expired"),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED, "Invalid token"),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, None),
    (ConflictError, status.HTTP_409_CONFLICT, None),
    (NotFoundError, status.HTTP_404_NOT_FOUND, None),
    (ValidationError, status.HTTP_400_BAD_REQUEST, None),
]


def resolve_error(exc: LoginAppError) -> tuple[int, str]:
    """Return the HTTP status and user-facing message for an exception."""
    for exc_type, status_code, message in ERROR_MAP:
        if isinstance(exc, exc_type):
            return status_code, message or exc.message
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"


async def login_app_error_handler(request: Request, exc: LoginAppError) -> JSONResponse:
    status_code, message = resolve_error(exc)
    if status_code >= 500:
        logger.error("Unhandled %s on %s", exc.code, request.url.path, exc_info=exc)

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    payload = exc.to_dict()
    payload["message"] = message
    if status_code >= 500:
        payload["details"] = {}
    body = ErrorResponse(**payload, code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the LoginAppError handler on an application."""
    app.add_exception_handler(LoginAppError, login_app_error_handler)
