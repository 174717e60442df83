"""
Authentication module data models.

These models define the requests the auth service accepts, the results it
returns, and the claim set it signs into session tokens.
"""

from datetime import datetime, timedelta
from pydantic import BaseModel, EmailStr, Field, field_validator


# bcrypt only looks at the first 72 bytes and refuses anything longer
BCRYPT_MAX_PASSWORD_BYTES = 72


class AuthConfig(BaseModel):
    """
    Configuration value handed to the auth service at construction.

    The service never reads the environment; whoever builds it decides
    these values (see shared.config.Settings.auth_config).
    """

    jwt_secret: str = Field(..., min_length=1, description="HMAC signing secret")
    token_duration: timedelta = Field(
        default=timedelta(hours=24), description="Session token lifetime"
    )
    bcrypt_cost: int = Field(default=10, ge=4, le=31, description="bcrypt log2 rounds")
    issuer: str = Field(default="login-app", description="Token issuer tag")

    model_config = {"frozen": True}

    @field_validator("token_duration")
    @classmethod
    def _positive_duration(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("token_duration must be positive")
        return value


class RegisterRequest(BaseModel):
    """Request to create a new account."""

    email: EmailStr = Field(..., description="Email address")
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )
        return value


class LoginRequest(BaseModel):
    """Request to authenticate with email and password."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=6)


class UserInfo(BaseModel):
    """
    Public-safe view of a user.

    Never carries the password hash; safe to return to any caller.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    username: str = Field(..., description="Username")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    created_at: datetime = Field(..., description="Account creation time")

    model_config = {"frozen": True}


class LoginResponse(BaseModel):
    """Result of a successful register or login."""

    token: str = Field(..., description="Signed session token")
    user: UserInfo
    expires_at: datetime = Field(..., description="Token expiry (UTC)")


class JWTClaims(BaseModel):
    """
    Claim set carried by session tokens.

    Registered claims (sub, iss, iat, nbf, exp) plus the user's id,
    email and username.
    """

    sub: str = Field(..., description="Subject (user ID)")
    iss: str = Field(..., description="Issuer")
    iat: int = Field(..., description="Issued at timestamp")
    nbf: int = Field(..., description="Not before timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    user_id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email")
    username: str = Field(..., description="User's username")
