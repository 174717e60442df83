"""
Identity module interface.

The auth service depends on IUserStore, not on the in-memory implementation,
so a durable store can be dropped in later without touching the service.
"""

from typing import Protocol, runtime_checkable

from .models import User


@runtime_checkable
class IUserStore(Protocol):
    """
    Storage contract for user records.

    Implementations must keep id, email and username unique and return
    copies, never their internal objects.
    """

    def create(self, user: User) -> None:
        """
        Store a new user.

        Raises:
            UserAlreadyExistsError: If the id, email or username is taken
        """
        ...

    def get_by_id(self, user_id: str) -> User:
        """
        Raises:
            UserNotFoundError: If no user has this id
        """
        ...

    def get_by_email(self, email: str) -> User:
        """
        Raises:
            UserNotFoundError: If no user has this email
        """
        ...

    def get_by_username(self, username: str) -> User:
        """
        Raises:
            UserNotFoundError: If no user has this username
        """
        ...

    def update(self, user: User) -> None:
        """
        Replace a stored user, re-indexing a changed email or username.

        Raises:
            UserNotFoundError: If the id is unknown
            UserAlreadyExistsError: If a new email or username belongs to another user
        """
        ...

    def delete(self, user_id: str) -> None:
        """
        Raises:
            UserNotFoundError: If no user has this id
        """
        ...

    def list_users(self) -> list[User]:
        """Snapshot of all stored users, in no particular order."""
        ...
