"""
Custom exception classes for the application.

This module defines domain-specific exceptions raised by the service layer.
The transport layer is the only place that maps them to HTTP status codes.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a requested resource does not exist for the caller"""


class ToDoListNotFoundError(NotFoundError):
    """
    Raised when a list does not exist or belongs to another user.

    Both cases produce the same message so callers cannot probe for the
    existence of lists they do not own.
    """

    def __init__(self, list_id: int, username: str):
        details = {"list_id": list_id, "username": username}
        msg = f"ToDoList with id: {list_id} belonging to User: {username} not found"
        super().__init__(msg, details)


class TaskNotFoundError(NotFoundError):
    """Raised when a task id is not part of the given list"""

    def __init__(self, list_id: int, task_id: int):
        details = {"list_id": list_id, "task_id": task_id}
        msg = f"ToDoList with id: {list_id} does not contain Task with id: {task_id}"
        super().__init__(msg, details)


class UserNotFoundError(NotFoundError):
    """Raised when no user has the given username"""

    def __init__(self, username: str):
        details = {"username": username}
        super().__init__(f"User: {username} not found", details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)

    @property
    def invalid_fields(self) -> dict:
        return self.details.get("invalid_fields", {})


class DuplicateUsernameError(ValidationError):
    """Raised when registering a username that is already taken"""

    def __init__(self, username: str):
        super().__init__(
            f"Username: {username} is already taken",
            {"username": "must be unique"}
        )


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
