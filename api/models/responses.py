"""
Success envelope for auth endpoints.
"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Standard success response format."""

    success: bool = True
    message: str
    data: Optional[T] = None
