"""
Error response body returned for every LoginAppError.
"""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Machine code, human message, HTTP status and any structured details."""

    error: str
    message: str
    code: int
    details: dict[str, Any] = {}
