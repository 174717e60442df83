"""
Authentication service implementation.

Registers users, verifies credentials and issues and validates session
tokens on top of an IUserStore. Store locks are only ever held inside store
calls; hashing and signing run on local copies.
"""

import logging
import secrets
from datetime import datetime, timezone
from functools import cached_property
from typing import Callable

from modules.identity import (
    IUserStore,
    User,
    UserAlreadyExistsError,
    UserNotFoundError as StoreUserNotFoundError,
)

from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserExistsError,
    UserNotFoundError,
)
from .interfaces import IAuthService
from .models import AuthConfig, LoginRequest, LoginResponse, RegisterRequest, UserInfo
from .passwords import hash_password, verify_password
from .tokens import decode_token, issue_token

logger = logging.getLogger(__name__)


def generate_user_id() -> str:
    """Random 128-bit identifier, hex encoded."""
    return secrets.token_hex(16)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Owns the signing secret and hash cost (via AuthConfig) and is the only
    caller of the user store.
    """

    def __init__(
        self,
        store: IUserStore,
        config: AuthConfig,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._store = store
        self._config = config
        self._clock = clock

    # -------------------------------------------------------------------------
    # IAuthService
    # -------------------------------------------------------------------------

    def register(self, request: RegisterRequest) -> LoginResponse:
        """
        Create a new account.

        The existence pre-check only saves hashing work; the store's own
        check inside create() is what actually guarantees uniqueness.
        """
        if self._exists(request.email, request.username):
            raise UserExistsError()

        user = User(
            id=generate_user_id(),
            email=request.email,
            username=request.username,
            password_hash=hash_password(request.password, self._config.bcrypt_cost),
            first_name=request.first_name,
            last_name=request.last_name,
        )

        try:
            self._store.create(user)
        except UserAlreadyExistsError as e:
            raise UserExistsError() from e

        stored = self._get_user(user.id)
        logger.info("Registered user %s", stored.id)
        return self._login_response(stored)

    def login(self, request: LoginRequest) -> LoginResponse:
        try:
            user = self._store.get_by_email(request.email)
        except StoreUserNotFoundError:
            # Same bcrypt work as a wrong password, so timing does not reveal the email
            verify_password(request.password, self._fallback_hash)
            logger.info("Login failed")
            raise InvalidCredentialsError() from None

        password_ok = verify_password(request.password, user.password_hash)
        if not user.is_active or not password_ok:
            logger.info("Login failed for user %s", user.id)
            raise InvalidCredentialsError()

        logger.debug("User %s logged in", user.id)
        return self._login_response(user)

    def validate_token(self, token: str) -> UserInfo:
        if not token:
            raise MissingTokenError()

        claims = decode_token(token, self._config, now=self._clock())

        # Claims may be stale; the store decides whether the subject is still valid
        try:
            user = self._store.get_by_id(claims.sub)
        except StoreUserNotFoundError:
            logger.debug("Rejected token for deleted user %s", claims.sub)
            raise InvalidTokenError("Token subject no longer exists") from None

        if not user.is_active:
            logger.debug("Rejected token for inactive user %s", user.id)
            raise InvalidTokenError("Token subject is inactive")

        return to_user_info(user)

    def get_profile(self, user_id: str) -> UserInfo:
        return to_user_info(self._get_user(user_id))

    # -------------------------------------------------------------------------
    # Account administration
    # -------------------------------------------------------------------------

    def deactivate_user(self, user_id: str) -> UserInfo:
        """Block login and invalidate every outstanding token of a user."""
        return self._set_active(user_id, False)

    def activate_user(self, user_id: str) -> UserInfo:
        """Re-enable a deactivated user."""
        return self._set_active(user_id, True)

    def delete_user(self, user_id: str) -> None:
        try:
            self._store.delete(user_id)
        except StoreUserNotFoundError:
            raise UserNotFoundError(user_id) from None
        logger.info("Deleted user %s", user_id)

    def list_users(self) -> list[UserInfo]:
        return [to_user_info(user) for user in self._store.list_users()]

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @cached_property
    def _fallback_hash(self) -> str:
        """Hash at the configured cost, checked against when no user matches."""
        return hash_password(secrets.token_hex(16), self._config.bcrypt_cost)

    def _exists(self, email: str, username: str) -> bool:
        for lookup, key in (
            (self._store.get_by_email, email),
            (self._store.get_by_username, username),
        ):
            try:
                lookup(key)
            except StoreUserNotFoundError:
                continue
            return True
        return False

    def _get_user(self, user_id: str) -> User:
        try:
            return self._store.get_by_id(user_id)
        except StoreUserNotFoundError:
            raise UserNotFoundError(user_id) from None

    def _set_active(self, user_id: str, active: bool) -> UserInfo:
        user = self._get_user(user_id)
        try:
            self._store.update(user.model_copy(update={"is_active": active}))
        except StoreUserNotFoundError:
            raise UserNotFoundError(user_id) from None
        logger.info("User %s %s", user_id, "activated" if active else "deactivated")
        return to_user_info(user)

    def _login_response(self, user: User) -> LoginResponse:
        token, expires_at = issue_token(user, self._config, self._clock())
        return LoginResponse(token=token, user=to_user_info(user), expires_at=expires_at)


def to_user_info(user: User) -> UserInfo:
    """Project a stored user onto its public-safe view."""
    return UserInfo(
        id=user.id,
        email=user.email,
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        created_at=user.created_at,
    )
