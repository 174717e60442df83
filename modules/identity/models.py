"""
Identity module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A registered user as held by the identity store.

    The password hash is excluded from serialization and repr; it is only
    readable as an attribute, for credential verification.
    """

    id: str = Field(..., description="Opaque unique identifier")
    email: str = Field(..., description="Unique email, stored as supplied")
    username: str = Field(..., description="Unique username")
    password_hash: str = Field(default="", exclude=True, repr=False)
    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")

    # Stamped by the store
    created_at: Optional[datetime] = Field(None, description="Creation time (UTC)")
    updated_at: Optional[datetime] = Field(None, description="Last update time (UTC)")
    is_active: bool = Field(default=True, description="Whether the account may authenticate")
