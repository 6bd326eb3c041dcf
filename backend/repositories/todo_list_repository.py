"""
ToDoList repository for list-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from models import ToDoList, Task
from .base_repository import BaseRepository


class ToDoListRepository(BaseRepository[ToDoList]):
    """Repository for ToDoList model operations."""

    def __init__(self, db: Session):
        super().__init__(db, ToDoList)

    def get_by_id_and_owner(self, list_id: int, username: str) -> Optional[ToDoList]:
        """
        Get a list only if it belongs to username.

        Args:
            list_id: ToDoList primary key
            username: Owner's username

        Returns:
            ToDoList with tasks loaded, or None if absent or owned by someone else
        """
        return self.db.query(self.model).options(
            selectinload(self.model.tasks)
        ).filter(
            self.model.id == list_id,
            self.model.owner == username
        ).first()

    def get_all_by_owner(self, username: str) -> List[ToDoList]:
        """
        Get every list owned by username.

        Returns:
            Lists ordered by id ascending
        """
        return self.db.query(self.model).options(
            selectinload(self.model.tasks)
        ).filter(
            self.model.owner == username
        ).order_by(self.model.id).all()

    def count_tasks(self, list_id: int) -> int:
        """Count task rows that reference list_id."""
        return self.db.query(Task).filter(Task.todo_list_id == list_id).count()
