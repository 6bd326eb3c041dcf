"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.

Benefits:
- Validation at API boundary
- Independent of database schema
- Clear API documentation
- Type safety
"""

from .list_request import ToDoListRequest, TaskRequest
from .user_request import UserRegistrationRequest, UserUpdateRequest, PasswordChangeRequest

__all__ = [
    "ToDoListRequest",
    "TaskRequest",
    "UserRegistrationRequest",
    "UserUpdateRequest",
    "PasswordChangeRequest",
]
