"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timedelta, timezone

from api.dependencies import reset_container
from modules.auth.models import AuthConfig, RegisterRequest
from modules.auth.service import AuthService
from modules.identity.models import User
from modules.identity.store import InMemoryUserStore
from shared.config import get_settings


# Test JWT secret (only for testing); 32+ bytes keeps PyJWT's HMAC key check quiet
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"


class FakeClock:
    """Settable clock for stores and services under test."""

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture(autouse=True)
def reset_app_state(monkeypatch):
    """Give every test fresh settings and a fresh service container."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("BCRYPT_COST", "4")
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def auth_config() -> AuthConfig:
    """Cheap bcrypt cost so tests stay fast."""
    return AuthConfig(
        jwt_secret=TEST_JWT_SECRET,
        token_duration=timedelta(hours=1),
        bcrypt_cost=4,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def service(store: InMemoryUserStore, auth_config: AuthConfig) -> AuthService:
    return AuthService(store=store, config=auth_config)


@pytest.fixture
def make_user():
    """Factory for unsaved user records."""

    def _make_user(
        user_id: str = "user-123",
        email: str = "test@example.com",
        username: str = "tester",
        **fields,
    ) -> User:
        fields.setdefault("password_hash", "not-a-real-hash")
        fields.setdefault("first_name", "Test")
        fields.setdefault("last_name", "User")
        return User(id=user_id, email=email, username=username, **fields)

    return _make_user


@pytest.fixture
def register_request() -> RegisterRequest:
    return RegisterRequest(
        email="a@x.com",
        username="alice",
        password="secret1",
        first_name="A",
        last_name="A",
    )
