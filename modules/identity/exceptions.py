"""
Identity module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when no stored user matches the requested key."""

    def __init__(self, field: str, value: str):
        super().__init__(
            f"User not found by {field}",
            code="USER_NOT_FOUND",
            details={"field": field},
        )
        self.field = field
        self.value = value


class UserAlreadyExistsError(ConflictError):
    """Raised when an id, email or username is already taken."""

    def __init__(self, field: str):
        super().__init__(
            "User already exists",
            code="USER_EXISTS",
            details={"field": field},
        )
        self.field = field
