"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances and
the HTTP Basic authentication dependency. Routes depend on the service
interfaces, so tests can override any provider through
app.dependency_overrides.
"""

import logging
from functools import lru_cache

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session

from config.app_config import BCRYPT_ROUNDS
from constants import HTTPStatus
from database import get_db
from domain.value_objects import Role
from exceptions import UserNotFoundError
from services.interfaces import IToDoListService, IUserService
from services.password_hasher import PasswordHasher
from services.todo_list_service import ToDoListService
from services.user_service import UserService

logger = logging.getLogger(__name__)

http_basic = HTTPBasic(auto_error=False, realm="todo-api")

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": 'Basic realm="todo-api"'}


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    """
    Provide the shared PasswordHasher.

    Returns:
        PasswordHasher using the configured bcrypt work factor
    """
    return PasswordHasher(rounds=BCRYPT_ROUNDS)


def get_user_service(
    db: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> IUserService:
    """
    Factory function for creating UserService instances.

    Args:
        db: Database session (injected)
        password_hasher: Password hasher (injected)

    Returns:
        IUserService: User service implementation
    """
    return UserService(db, password_hasher)


def get_todo_list_service(db: Session = Depends(get_db)) -> IToDoListService:
    """
    Factory function for creating ToDoListService instances.

    Args:
        db: Database session (injected)

    Returns:
        IToDoListService: List service implementation
    """
    return ToDoListService(db)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=HTTPStatus.UNAUTHORIZED,
        detail=detail,
        headers=_UNAUTHORIZED_HEADERS,
    )


def get_authenticated_username(
    credentials: HTTPBasicCredentials | None = Depends(http_basic),
    user_service: IUserService = Depends(get_user_service),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> str:
    """
    Authenticate the caller with HTTP Basic credentials.

    Unknown usernames and wrong passwords produce the same 401 response.

    Returns:
        The authenticated username, to be passed explicitly to services

    Raises:
        HTTPException: 401 if unauthenticated, 403 if the user lacks the USER role
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        user = user_service.load_user_for_authentication(credentials.username)
    except UserNotFoundError:
        logger.info(f"Authentication failed for unknown User: {credentials.username}")
        raise _unauthorized("Invalid username or password")

    if not password_hasher.verify(credentials.password, user.password_hash):
        logger.info(f"Authentication failed for User: {credentials.username}")
        raise _unauthorized("Invalid username or password")

    if not user.has_role(Role.USER):
        logger.warning(f"User: {user.username} lacks role {Role.USER.value}")
        raise HTTPException(status_code=HTTPStatus.FORBIDDEN, detail="Access denied")

    return user.username
