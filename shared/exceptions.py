"""
Error kinds shared by every login-app module.

Modules raise subclasses of these; the HTTP layer picks a status code from
the kind alone (see api/middleware/errors.py), so a new module error only
needs the right base class.
"""

from typing import Any, Optional


class LoginAppError(Exception):
    """
    Root of all login-app errors.

    Args:
        message: Human readable description, safe to return to clients
        code: Stable machine code; defaults to the class name
        details: Structured context for clients (never secrets)
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Body fields for an error response."""
        return {"error": self.code, "message": self.message, "details": self.details}


class NotFoundError(LoginAppError):
    """A lookup key matched no record."""


class ConflictError(LoginAppError):
    """A unique key is already taken."""


class ValidationError(LoginAppError):
    """Input the domain refuses even though it is well-formed."""


class AuthenticationError(LoginAppError):
    """Credentials or tokens were missing, wrong or no longer valid."""


class ConfigurationError(LoginAppError):
    """Settings are missing or unsafe for the selected environment."""
