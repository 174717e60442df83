"""
Session token encoding and decoding.

Tokens are HS256-signed JWTs. Decoding pins the algorithm list to HS256 so
a token claiming another algorithm (including "none") is rejected.

Time claims are checked against the caller's clock rather than PyJWT's, so a
service running on an injected clock accepts the tokens it issues.
"""

from datetime import datetime, timezone
from typing import Optional

import jwt

from modules.identity.models import User

from .exceptions import ExpiredTokenError, InvalidTokenError
from .models import AuthConfig, JWTClaims


ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "iss", "iat", "nbf", "exp"]

# Signature, issuer and presence are checked by PyJWT; times by check_times()
DECODE_OPTIONS = {
    "require": REQUIRED_CLAIMS,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
}


def issue_token(user: User, config: AuthConfig, now: datetime) -> tuple[str, datetime]:
    """
    Sign a session token for a user.

    Args:
        user: The user the token asserts
        config: Secret, lifetime and issuer
        now: Issuance instant (timezone-aware)

    Returns:
        Tuple of (encoded token, absolute expiry instant). The expiry is
        truncated to whole seconds, matching the signed exp claim.
    """
    expires_at = (now + config.token_duration).replace(microsecond=0)
    issued = int(now.timestamp())

    claims = JWTClaims(
        sub=user.id,
        iss=config.issuer,
        iat=issued,
        nbf=issued,
        exp=int(expires_at.timestamp()),
        user_id=user.id,
        email=user.email,
        username=user.username,
    )
    token = jwt.encode(claims.model_dump(), config.jwt_secret, algorithm=ALGORITHM)
    return token, expires_at


def check_times(claims: JWTClaims, now: datetime) -> None:
    """Reject a token outside its nbf..exp window as seen at `now`."""
    current = int(now.timestamp())
    if claims.exp <= current:
        raise ExpiredTokenError()
    if claims.nbf > current or claims.iat > current:
        raise InvalidTokenError("Invalid token: not yet valid")


def decode_token(
    token: str,
    config: AuthConfig,
    now: Optional[datetime] = None,
) -> JWTClaims:
    """
    Verify a token's signature and time claims and return its claims.

    Args:
        token: The encoded JWT
        config: Secret and expected issuer
        now: Validation instant; defaults to the current UTC time

    Raises:
        ExpiredTokenError: If the signature is valid but exp has passed
        InvalidTokenError: For any other failure (bad signature, wrong
            algorithm or issuer, malformed token, missing claims, not yet
            valid)
    """
    try:
        payload = jwt.decode(
            token,
            config.jwt_secret,
            algorithms=[ALGORITHM],
            issuer=config.issuer,
            options=DECODE_OPTIONS,
        )
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(f"Invalid token: {e}") from e

    try:
        claims = JWTClaims(**payload)
    except ValueError as e:
        raise InvalidTokenError("Invalid token: malformed claims") from e

    check_times(claims, now or datetime.now(timezone.utc))

    if claims.user_id != claims.sub:
        raise InvalidTokenError("Invalid token: subject mismatch")
    return claims
