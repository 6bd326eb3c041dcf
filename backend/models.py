from sqlalchemy import Column, String, Integer, Boolean, Text, DateTime, ForeignKey, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from database import Base


class User(Base):
    """
    A registered account.

    The password is only ever held as a bcrypt hash. Authorities are stored
    one row per role in user_authorities.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(254), nullable=True)
    name = Column(String(100), nullable=True)  # Display name
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    authorities = relationship(
        "Authority",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    todo_lists = relationship("ToDoList", back_populates="owner_user")

    @property
    def roles(self) -> list[str]:
        return [a.authority for a in self.authorities]

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"

    __table_args__ = (
        CheckConstraint("username != ''"),
        UniqueConstraint('username', name='uq_users_username'),
    )


class Authority(Base):
    __tablename__ = 'user_authorities'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    authority = Column(String(50), nullable=False)

    user = relationship("User", back_populates="authorities")

    __table_args__ = (
        UniqueConstraint('user_id', 'authority', name='uq_user_authority'),
    )


class ToDoList(Base):
    """
    A named, owned collection of tasks.

    Invariants:
    - id and created_at never change after creation
    - owner is the username of exactly one User
    - tasks are composed: removing a task from the collection deletes it,
      deleting the list deletes all of its tasks
    - finished_at is set only when the list goes from active to inactive
    """
    __tablename__ = 'todo_lists'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner = Column(String(50), ForeignKey('users.username'), nullable=False)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    finished_at = Column(DateTime, nullable=True)

    owner_user = relationship("User", back_populates="todo_lists")
    tasks = relationship(
        "Task",
        back_populates="todo_list",
        cascade="all, delete-orphan",
        order_by="Task.id",
        passive_deletes=True,
    )

    def find_task(self, task_id: int):
        """Return the task with task_id from this list, or None."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def add_task(self, task: "Task") -> "Task":
        self.tasks.append(task)
        return task

    def remove_task(self, task: "Task") -> None:
        """Detach task from this list; the orphan is deleted on flush."""
        self.tasks.remove(task)

    def set_active(self, active: bool, when: datetime | None = None) -> None:
        """
        Set the active flag.

        finished_at records the moment the list was deactivated and is
        cleared on re-activation. Repeating the current value is a no-op.
        """
        currently_active = self.active if self.active is not None else True
        if active == currently_active:
            self.active = active
            return
        self.active = active
        self.finished_at = None if active else (when or datetime.utcnow())

    def __repr__(self):
        return f"<ToDoList(id={self.id}, owner='{self.owner}', title='{self.title}')>"

    __table_args__ = (
        CheckConstraint("title != ''"),
        Index('idx_todo_lists_owner', 'owner'),
    )


class Task(Base):
    __tablename__ = 'tasks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    todo_list_id = Column(Integer, ForeignKey('todo_lists.id', ondelete='CASCADE'), nullable=False)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    todo_list = relationship("ToDoList", back_populates="tasks")

    def __repr__(self):
        return f"<Task(id={self.id}, list={self.todo_list_id}, name='{self.name}')>"

    __table_args__ = (
        CheckConstraint("name != ''"),
        Index('idx_tasks_list', 'todo_list_id'),
    )
