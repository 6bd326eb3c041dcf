"""
User Service

Handles registration, profile updates and password changes, and supplies
credential lookups to the HTTP Basic authentication dependency.
"""

import re
from datetime import datetime
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from constants import ValidationLimits
from database import commit_session
from domain.value_objects import Role
from models import User, Authority
from repositories.user_repository import UserRepository
from dtos.request import UserRegistrationRequest, UserUpdateRequest
from dtos.response import UserResponse
from dtos.internal import UserCredentials
from exceptions import UserNotFoundError, ValidationError, DuplicateUsernameError
from services.interfaces import IUserService
from services.password_hasher import PasswordHasher
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)

_USERNAME_RE = re.compile(ValidationLimits.USERNAME_PATTERN)
# HTTP Basic credentials are decoded as ASCII, so anything else could never log in
_PASSWORD_RE = re.compile(ValidationLimits.PASSWORD_PATTERN)


def validate_username(username: Optional[str]) -> Optional[str]:
    """
    Check a username against the registration policy.

    Returns:
        A message describing the problem, or None if the username is valid
    """
    if username is None or not username.strip():
        return "must not be blank"
    if not (ValidationLimits.USERNAME_MIN_LENGTH <= len(username) <= ValidationLimits.USERNAME_MAX_LENGTH):
        return (
            f"size must be between {ValidationLimits.USERNAME_MIN_LENGTH} "
            f"and {ValidationLimits.USERNAME_MAX_LENGTH}"
        )
    if not _USERNAME_RE.match(username):
        return "may only contain letters, digits, '.', '_' and '-'"
    return None


def validate_password(password: Optional[str]) -> Optional[str]:
    """
    Check a password against the password policy.

    Returns:
        A message describing the problem, or None if the password is acceptable
    """
    if password is None or not password.strip():
        return "must not be blank"
    if not (ValidationLimits.PASSWORD_MIN_LENGTH <= len(password) <= ValidationLimits.PASSWORD_MAX_LENGTH):
        return (
            f"size must be between {ValidationLimits.PASSWORD_MIN_LENGTH} "
            f"and {ValidationLimits.PASSWORD_MAX_LENGTH}"
        )
    if not _PASSWORD_RE.fullmatch(password):
        return "may only contain printable ASCII characters"
    return None


class UserService(IUserService):
    """Service for user accounts and credentials."""

    def __init__(self, db: Session, password_hasher: PasswordHasher):
        """
        Initialize UserService.

        Args:
            db: Database session
            password_hasher: Hasher used for stored passwords
        """
        self.db = db
        self.user_repo = UserRepository(db)
        self.password_hasher = password_hasher

    def _get_user(self, username: str) -> User:
        user = self.user_repo.get_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user

    def load_user_for_authentication(self, username: str) -> UserCredentials:
        user = self._get_user(username)
        return UserCredentials(
            username=user.username,
            password_hash=user.password_hash,
            authorities=list(user.roles),
        )

    def get_user_by_username(self, username: str) -> UserResponse:
        return UserResponse.model_validate(self._get_user(username))

    @log_operation("create_user")
    def create_user(self, user_data: UserRegistrationRequest) -> UserResponse:
        invalid_fields = {}
        username_problem = validate_username(user_data.username)
        if username_problem:
            invalid_fields["username"] = username_problem
        password_problem = validate_password(user_data.password)
        if password_problem:
            invalid_fields["password"] = password_problem
        if invalid_fields:
            raise ValidationError("Invalid user data", invalid_fields)

        if self.user_repo.exists_by_username(user_data.username):
            raise DuplicateUsernameError(user_data.username)

        user = User(
            username=user_data.username,
            password_hash=self.password_hasher.hash(user_data.password),
            email=user_data.email,
            name=user_data.name,
            created_at=datetime.utcnow(),
        )
        user.authorities = [Authority(authority=role.value) for role in Role.default_roles()]

        try:
            self.user_repo.create(user)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same username
            self.db.rollback()
            raise DuplicateUsernameError(user_data.username)

        commit_session(self.db, "create_user")
        self.db.refresh(user)
        return UserResponse.model_validate(user)

    @log_operation("update_user")
    def update_user(self, username: str, user_data: UserUpdateRequest) -> UserResponse:
        user = self._get_user(username)

        if user_data.email is not None:
            user.email = user_data.email
        if user_data.name is not None:
            user.name = user_data.name

        self.user_repo.update(user)
        commit_session(self.db, "update_user")
        self.db.refresh(user)
        return UserResponse.model_validate(user)

    @log_operation("change_password")
    def change_password(self, username: str, new_password: str) -> None:
        user = self._get_user(username)

        password_problem = validate_password(new_password)
        if password_problem:
            raise ValidationError("Invalid password", {"new_password": password_problem})

        user.password_hash = self.password_hasher.hash(new_password)
        self.user_repo.update(user)
        commit_session(self.db, "change_password")

    def user_exists(self, username: str) -> bool:
        return self.user_repo.exists_by_username(username)
