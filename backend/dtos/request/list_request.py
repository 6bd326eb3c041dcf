"""
ToDoList Request DTOs

DTOs for list and task API requests.

Fields are optional at this layer so the same DTO serves both create and
update; the service decides which fields are required for each operation.
Surrounding whitespace is trimmed before length limits are checked.
"""

from pydantic import BaseModel, Field
from typing import Optional

from constants import ValidationLimits


class ToDoListRequest(BaseModel):
    """
    Request DTO for creating or updating a list.

    On update only the fields that are present are applied. id, owner and
    created_at are never accepted from the client.
    """

    title: Optional[str] = Field(
        None,
        max_length=ValidationLimits.TITLE_MAX_LENGTH,
        description="List title (required on create, trimmed)"
    )
    description: Optional[str] = Field(
        None,
        max_length=ValidationLimits.DESCRIPTION_MAX_LENGTH,
        description="Free text description"
    )
    active: Optional[bool] = Field(None, description="Whether the list is active")

    class Config:
        """Pydantic configuration."""
        str_strip_whitespace = True
        json_schema_extra = {
            "example": {
                "title": "Groceries",
                "description": "Weekly shop",
                "active": True
            }
        }


class TaskRequest(BaseModel):
    """Request DTO for adding a task to a list."""

    name: Optional[str] = Field(
        None,
        max_length=ValidationLimits.TASK_NAME_MAX_LENGTH,
        description="Task name (required, trimmed)"
    )
    description: Optional[str] = Field(
        None,
        max_length=ValidationLimits.DESCRIPTION_MAX_LENGTH,
        description="Free text description"
    )
    completed: bool = Field(False, description="Whether the task is done")

    class Config:
        """Pydantic configuration."""
        str_strip_whitespace = True
        json_schema_extra = {
            "example": {
                "name": "Milk",
                "description": "Semi-skimmed",
                "completed": False
            }
        }
