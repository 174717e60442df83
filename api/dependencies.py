"""
Service wiring for the HTTP layer.

Routes never build stores or services themselves; they ask for them through
the ``Depends()`` functions at the bottom of this module. One container per
process owns the user store and the auth service bound to it, so every
request sees the same set of users.

A durable store would be plugged in by changing ``ServiceContainer.users``.
"""

import threading
from datetime import timedelta
from typing import TYPE_CHECKING

from modules.auth.models import AuthConfig
from shared.config import Settings, get_settings

if TYPE_CHECKING:
    from modules.auth.service import AuthService
    from modules.identity.interfaces import IUserStore


def build_auth_config(settings: Settings) -> AuthConfig:
    """Project the auth-related settings onto the value AuthService consumes."""
    return AuthConfig(
        jwt_secret=settings.jwt_secret,
        token_duration=timedelta(seconds=settings.token_duration_seconds),
        bcrypt_cost=settings.bcrypt_cost,
        issuer=settings.jwt_issuer,
    )


class ServiceContainer:
    """
    Lazily built store and auth service shared by all requests.

    Routes run on FastAPI's threadpool, so construction happens under a lock:
    two first requests arriving together must still get one store.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._user_store: "IUserStore | None" = None
        self._auth_service: "AuthService | None" = None

    @property
    def users(self) -> "IUserStore":
        with self._lock:
            if self._user_store is None:
                from modules.identity.store import InMemoryUserStore
                self._user_store = InMemoryUserStore()
            return self._user_store

    @property
    def auth(self) -> "AuthService":
        """Auth service configured from the current settings."""
        with self._lock:
            if self._auth_service is None:
                from modules.auth.service import AuthService
                self._auth_service = AuthService(
                    store=self.users,
                    config=build_auth_config(get_settings()),
                )
            return self._auth_service

    def reset(self) -> None:
        """Drop the store (and every user in it) along with the service."""
        with self._lock:
            self._user_store = None
            self._auth_service = None


_container: ServiceContainer | None = None
_container_lock = threading.Lock()


def get_container() -> ServiceContainer:
    global _container
    with _container_lock:
        if _container is None:
            _container = ServiceContainer()
        return _container


def reset_container() -> None:
    """Forget the process container; tests call this between cases."""
    global _container
    with _container_lock:
        _container = None


def get_auth_service() -> "AuthService":
    return get_container().auth


def get_user_store() -> "IUserStore":
    return get_container().users
