"""
User Response DTOs
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List


class UserResponse(BaseModel):
    """Public view of a user. Never carries the password hash."""

    username: str = Field(description="Unique username")
    email: Optional[str] = Field(None, description="Contact email")
    name: Optional[str] = Field(None, description="Display name")
    roles: List[str] = Field(default_factory=list, description="Granted authorities")
    created_at: datetime = Field(description="Registration timestamp")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
