"""
User Request DTOs

DTOs for registration and account management requests.
Username and password policy is enforced by UserService.
"""

from pydantic import BaseModel, Field
from typing import Optional

from constants import ValidationLimits


class UserRegistrationRequest(BaseModel):
    """Request DTO for registering a new user."""

    username: str = Field(description="Unique username")
    password: str = Field(description="Plaintext password, hashed before storage")
    email: Optional[str] = Field(None, max_length=ValidationLimits.EMAIL_MAX_LENGTH)
    name: Optional[str] = Field(None, max_length=ValidationLimits.NAME_MAX_LENGTH)

    def __repr__(self) -> str:
        return f"UserRegistrationRequest(username={self.username!r})"

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "username": "alice",
                "password": "correct-horse-battery",
                "email": "alice@example.com",
                "name": "Alice"
            }
        }


class UserUpdateRequest(BaseModel):
    """Request DTO for updating profile fields. The password is changed separately."""

    email: Optional[str] = Field(None, max_length=ValidationLimits.EMAIL_MAX_LENGTH)
    name: Optional[str] = Field(None, max_length=ValidationLimits.NAME_MAX_LENGTH)


class PasswordChangeRequest(BaseModel):
    new_password: str = Field(description="Replacement password")

    def __repr__(self) -> str:
        return "PasswordChangeRequest(new_password=***)"
