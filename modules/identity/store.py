"""
In-memory user store.

Holds user records keyed by id plus two unique secondary indexes
(email -> id, username -> id). One reader-writer lock covers all three maps,
so readers never observe an index that disagrees with the records.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from shared.locks import ReadWriteLock

from .exceptions import UserAlreadyExistsError, UserNotFoundError
from .interfaces import IUserStore
from .models import User

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryUserStore(IUserStore):
    """
    Process-lifetime implementation of IUserStore.

    Every public method takes the lock for its whole duration and hands out
    copies, so callers can never mutate stored state directly.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._lock = ReadWriteLock()
        self._users: dict[str, User] = {}
        self._email_index: dict[str, str] = {}
        self._username_index: dict[str, str] = {}
        self._clock = clock

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, user: User) -> None:
        with self._lock.write_locked():
            if user.id in self._users:
                raise UserAlreadyExistsError("id")
            if user.email in self._email_index:
                raise UserAlreadyExistsError("email")
            if user.username in self._username_index:
                raise UserAlreadyExistsError("username")

            now = self._clock()
            stored = user.model_copy(
                update={"created_at": now, "updated_at": now, "is_active": True}
            )
            self._users[stored.id] = stored
            self._email_index[stored.email] = stored.id
            self._username_index[stored.username] = stored.id

        logger.debug("Stored user %s", user.id)

    def update(self, user: User) -> None:
        with self._lock.write_locked():
            existing = self._users.get(user.id)
            if existing is None:
                raise UserNotFoundError("id", user.id)

            email_changed = user.email != existing.email
            username_changed = user.username != existing.username

            # All collision checks come before any index is touched
            if email_changed and self._email_index.get(user.email, user.id) != user.id:
                raise UserAlreadyExistsError("email")
            if (
                username_changed
                and self._username_index.get(user.username, user.id) != user.id
            ):
                raise UserAlreadyExistsError("username")

            if email_changed:
                del self._email_index[existing.email]
                self._email_index[user.email] = user.id
            if username_changed:
                del self._username_index[existing.username]
                self._username_index[user.username] = user.id

            self._users[user.id] = user.model_copy(
                update={"created_at": existing.created_at, "updated_at": self._clock()}
            )

        logger.debug("Updated user %s", user.id)

    def delete(self, user_id: str) -> None:
        with self._lock.write_locked():
            user = self._users.pop(user_id, None)
            if user is None:
                raise UserNotFoundError("id", user_id)
            del self._email_index[user.email]
            del self._username_index[user.username]

        logger.debug("Deleted user %s", user_id)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_by_id(self, user_id: str) -> User:
        with self._lock.read_locked():
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError("id", user_id)
            return user.model_copy()

    def get_by_email(self, email: str) -> User:
        with self._lock.read_locked():
            user_id = self._email_index.get(email)
            if user_id is None:
                raise UserNotFoundError("email", email)
            return self._users[user_id].model_copy()

    def get_by_username(self, username: str) -> User:
        with self._lock.read_locked():
            user_id = self._username_index.get(username)
            if user_id is None:
                raise UserNotFoundError("username", username)
            return self._users[user_id].model_copy()

    def list_users(self) -> list[User]:
        with self._lock.read_locked():
            return [user.model_copy() for user in self._users.values()]
