"""
ToDoList Response DTOs

DTOs for list and task API responses.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List


class TaskResponse(BaseModel):
    """Response DTO for a task inside a list."""

    id: int = Field(description="Task ID")
    name: str = Field(description="Task name")
    description: Optional[str] = Field(None, description="Task description")
    completed: bool = Field(description="Whether the task is done")
    created_at: datetime = Field(description="Creation timestamp")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models


class ToDoListResponse(BaseModel):
    """
    Response DTO for a list with its tasks.

    This DTO separates the API response from the database model,
    allowing them to evolve independently.
    """

    id: int = Field(description="List ID")
    title: str = Field(description="List title")
    description: Optional[str] = Field(None, description="List description")
    active: bool = Field(description="Whether the list is active")
    owner: str = Field(description="Username of the owner")
    created_at: datetime = Field(description="Creation timestamp")
    finished_at: Optional[datetime] = Field(None, description="When the list was deactivated")
    tasks: List[TaskResponse] = Field(default_factory=list, description="Tasks ordered by id")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
