"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and swapping the storage behind it.
"""

from typing import Protocol, runtime_checkable

from .models import LoginRequest, LoginResponse, RegisterRequest, UserInfo


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    def register(self, request: RegisterRequest) -> LoginResponse:
        """
        Create an account and sign a session token for it.

        Raises:
            UserExistsError: If the email or username is already taken
        """
        ...

    def login(self, request: LoginRequest) -> LoginResponse:
        """
        Verify credentials and sign a session token.

        Raises:
            InvalidCredentialsError: For an unknown email, a wrong password
                or an inactive account alike
        """
        ...

    def validate_token(self, token: str) -> UserInfo:
        """
        Validate a JWT token and return the user it belongs to.

        Args:
            token: Session token from the Authorization header

        Returns:
            UserInfo of the token's subject, read fresh from storage

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is invalid or its subject is
                deleted or inactive
        """
        ...

    def get_profile(self, user_id: str) -> UserInfo:
        """
        Get a user's public profile by their ID.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...
