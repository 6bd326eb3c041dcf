"""
ToDoList Service

Owns every read and write of a ToDoList and its tasks. All operations are
scoped to the username passed in by the caller: a list that exists but
belongs to someone else is reported exactly like a list that does not exist.

Mutating operations validate their input before touching the aggregate and
commit once before returning.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from database import commit_session
from models import ToDoList, Task
from repositories.todo_list_repository import ToDoListRepository
from repositories.user_repository import UserRepository
from dtos.request import ToDoListRequest, TaskRequest
from dtos.response import ToDoListResponse
from exceptions import ToDoListNotFoundError, TaskNotFoundError, UserNotFoundError, ValidationError
from services.interfaces import IToDoListService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


def _require_text(value: Optional[str], field: str, invalid_fields: dict) -> None:
    """Record field in invalid_fields unless value holds non-whitespace text."""
    if value is None:
        invalid_fields[field] = "must not be null"
    elif not value.strip():
        invalid_fields[field] = "must not be blank"


class ToDoListService(IToDoListService):
    """Service for list ownership and task management."""

    def __init__(self, db: Session):
        """
        Initialize ToDoListService.

        Args:
            db: Database session
        """
        self.db = db
        self.list_repo = ToDoListRepository(db)
        self.user_repo = UserRepository(db)

    def _get_owned_list(self, list_id: int, username: str) -> ToDoList:
        todo_list = self.list_repo.get_by_id_and_owner(list_id, username)
        if todo_list is None:
            raise ToDoListNotFoundError(list_id, username)
        return todo_list

    def _save(self, todo_list: ToDoList, operation: str) -> ToDoListResponse:
        """Commit pending changes and return the refreshed aggregate."""
        commit_session(self.db, operation)
        self.db.refresh(todo_list)
        return ToDoListResponse.model_validate(todo_list)

    @staticmethod
    def _validate_list_data(list_data: ToDoListRequest, creating: bool) -> None:
        invalid_fields = {}
        if creating or list_data.title is not None:
            _require_text(list_data.title, "title", invalid_fields)
        if invalid_fields:
            raise ValidationError("Invalid to_do_list data", invalid_fields)

    @staticmethod
    def _validate_task_data(task_data: TaskRequest) -> None:
        invalid_fields = {}
        _require_text(task_data.name, "name", invalid_fields)
        if invalid_fields:
            raise ValidationError("Invalid task data", invalid_fields)

    def get_list_by_id_for_user(self, list_id: int, username: str) -> ToDoListResponse:
        todo_list = self._get_owned_list(list_id, username)
        return ToDoListResponse.model_validate(todo_list)

    def list_all_for_user(self, username: str) -> List[ToDoListResponse]:
        lists = self.list_repo.get_all_by_owner(username)
        logger.debug(f"Found {len(lists)} list(s) for User: {username}")
        return [ToDoListResponse.model_validate(todo_list) for todo_list in lists]

    @log_operation("create_list")
    def create_list(self, list_data: ToDoListRequest, username: str) -> ToDoListResponse:
        self._validate_list_data(list_data, creating=True)

        if not self.user_repo.exists_by_username(username):
            raise UserNotFoundError(username)

        todo_list = ToDoList(
            owner=username,
            title=list_data.title.strip(),
            description=list_data.description,
            active=True if list_data.active is None else list_data.active,
            created_at=datetime.utcnow(),
        )
        if not todo_list.active:
            todo_list.finished_at = todo_list.created_at

        self.list_repo.create(todo_list)
        return self._save(todo_list, "create_list")

    @log_operation("update_list")
    def update_list(self, list_id: int, list_data: ToDoListRequest, username: str) -> ToDoListResponse:
        todo_list = self._get_owned_list(list_id, username)
        self._validate_list_data(list_data, creating=False)

        if list_data.title is not None:
            todo_list.title = list_data.title.strip()
        if list_data.description is not None:
            todo_list.description = list_data.description
        if list_data.active is not None:
            todo_list.set_active(list_data.active)

        self.list_repo.update(todo_list)
        return self._save(todo_list, "update_list")

    @log_operation("delete_list")
    def delete_list(self, list_id: int, username: str) -> None:
        todo_list = self._get_owned_list(list_id, username)
        self.list_repo.delete(todo_list)
        commit_session(self.db, "delete_list")

    @log_operation("set_active")
    def set_active(self, list_id: int, username: str, active: bool) -> ToDoListResponse:
        todo_list = self._get_owned_list(list_id, username)
        todo_list.set_active(active)
        self.list_repo.update(todo_list)
        return self._save(todo_list, "set_active")

    @log_operation("add_task")
    def add_task(self, list_id: int, username: str, task_data: TaskRequest) -> ToDoListResponse:
        todo_list = self._get_owned_list(list_id, username)
        self._validate_task_data(task_data)

        task = Task(
            name=task_data.name.strip(),
            description=task_data.description,
            completed=task_data.completed,
            created_at=datetime.utcnow(),
        )
        todo_list.add_task(task)
        self.list_repo.update(todo_list)
        logger.debug(f"Assigned id {task.id} to Task '{task.name}' in ToDoList {list_id}")
        return self._save(todo_list, "add_task")

    @log_operation("remove_task")
    def remove_task(self, list_id: int, username: str, task_id: int) -> ToDoListResponse:
        todo_list = self._get_owned_list(list_id, username)

        task = todo_list.find_task(task_id)
        if task is None:
            raise TaskNotFoundError(list_id, task_id)

        todo_list.remove_task(task)
        self.list_repo.update(todo_list)
        return self._save(todo_list, "remove_task")
