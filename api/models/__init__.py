"""API models package."""

from .errors import ErrorResponse
from .responses import SuccessResponse

__all__ = [
    "ErrorResponse",
    "SuccessResponse",
]
