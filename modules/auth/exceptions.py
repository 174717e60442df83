"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Unknown email, wrong password and inactive account all raise this same
    error so callers cannot tell which check failed.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid, malformed or its subject is gone."""

    def __init__(self, message: str = "Invalid authentication token", code: str = "INVALID_TOKEN"):
        super().__init__(message, code=code)


class MissingTokenError(InvalidTokenError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class UserExistsError(ConflictError):
    """Raised when registering with an email or username already in use."""

    def __init__(self, message: str = "User already exists"):
        super().__init__(message, code="USER_EXISTS")


class UserNotFoundError(NotFoundError):
    """Raised when the requested user doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidPasswordError(ValidationError):
    """Raised when the hashing primitive rejects a password."""

    def __init__(self, message: str = "Password cannot be hashed"):
        super().__init__(message, code="INVALID_PASSWORD")
