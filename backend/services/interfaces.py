"""
Service Interfaces

Abstract base classes for the service layer following Dependency Inversion Principle.
Routes depend on these interfaces; dependencies.py provides the concrete
implementations, which tests can replace.

Every list operation takes the authenticated username as an explicit
argument; services never read the caller from ambient state.
"""

from abc import ABC, abstractmethod
from typing import List

from dtos.request import ToDoListRequest, TaskRequest, UserRegistrationRequest, UserUpdateRequest
from dtos.response import ToDoListResponse, UserResponse
from dtos.internal import UserCredentials


class IToDoListService(ABC):
    """
    Abstract interface for list ownership and task management.

    Every read and write is scoped to the owning username.
    """

    @abstractmethod
    def get_list_by_id_for_user(self, list_id: int, username: str) -> ToDoListResponse:
        """
        Get a list owned by username.

        Raises:
            ToDoListNotFoundError: If the list is absent or owned by another user
        """
        pass

    @abstractmethod
    def list_all_for_user(self, username: str) -> List[ToDoListResponse]:
        """
        Get every list owned by username, ordered by id.
        """
        pass

    @abstractmethod
    def create_list(self, list_data: ToDoListRequest, username: str) -> ToDoListResponse:
        """
        Create a list owned by username.

        Raises:
            ValidationError: If the title is missing or blank
            UserNotFoundError: If username is not registered
        """
        pass

    @abstractmethod
    def update_list(self, list_id: int, list_data: ToDoListRequest, username: str) -> ToDoListResponse:
        """
        Apply the present mutable fields (title, description, active).

        Raises:
            ToDoListNotFoundError: If the list is absent or not owned
            ValidationError: If a provided field is invalid
        """
        pass

    @abstractmethod
    def delete_list(self, list_id: int, username: str) -> None:
        """
        Delete a list and all of its tasks.

        Raises:
            ToDoListNotFoundError: If the list is absent or not owned
        """
        pass

    @abstractmethod
    def set_active(self, list_id: int, username: str, active: bool) -> ToDoListResponse:
        """
        Set the active flag of a list.

        Raises:
            ToDoListNotFoundError: If the list is absent or not owned
        """
        pass

    @abstractmethod
    def add_task(self, list_id: int, username: str, task_data: TaskRequest) -> ToDoListResponse:
        """
        Append a new task to a list.

        Raises:
            ToDoListNotFoundError: If the list is absent or not owned
            ValidationError: If the task name is missing or blank
        """
        pass

    @abstractmethod
    def remove_task(self, list_id: int, username: str, task_id: int) -> ToDoListResponse:
        """
        Remove a task from a list.

        Raises:
            ToDoListNotFoundError: If the list is absent or not owned
            TaskNotFoundError: If the list has no task with task_id
        """
        pass


class IUserService(ABC):
    """
    Abstract interface for user identity and credentials.
    """

    @abstractmethod
    def load_user_for_authentication(self, username: str) -> UserCredentials:
        """
        Get the stored credentials and authorities for username.

        Used only by the authentication dependency.

        Raises:
            UserNotFoundError: If username is not registered
        """
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> UserResponse:
        """
        Raises:
            UserNotFoundError: If username is not registered
        """
        pass

    @abstractmethod
    def create_user(self, user_data: UserRegistrationRequest) -> UserResponse:
        """
        Register a user with the USER role.

        Raises:
            ValidationError: If the username or password fails policy
            DuplicateUsernameError: If the username is taken
        """
        pass

    @abstractmethod
    def update_user(self, username: str, user_data: UserUpdateRequest) -> UserResponse:
        """
        Update profile fields. Never touches the password.

        Raises:
            UserNotFoundError: If username is not registered
        """
        pass

    @abstractmethod
    def change_password(self, username: str, new_password: str) -> None:
        """
        Raises:
            UserNotFoundError: If username is not registered
            ValidationError: If new_password fails policy
        """
        pass

    @abstractmethod
    def user_exists(self, username: str) -> bool:
        pass
