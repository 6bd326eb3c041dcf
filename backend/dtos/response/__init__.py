"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.

Benefits:
- Hide internal database structure
- Control exactly what data is exposed
- Version API responses independently
"""

from .list_response import ToDoListResponse, TaskResponse
from .user_response import UserResponse

__all__ = ["ToDoListResponse", "TaskResponse", "UserResponse"]
