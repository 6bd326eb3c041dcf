"""
User API endpoints

Registration is the only unauthenticated route under /api/v1.
"""
from fastapi import APIRouter, Depends, Response
import logging

from constants import HTTPStatus
from dependencies import get_authenticated_username, get_user_service
from dtos.request import UserRegistrationRequest, UserUpdateRequest, PasswordChangeRequest
from dtos.response import UserResponse
from services.interfaces import IUserService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Register user")
def register_user(
    user_data: UserRegistrationRequest,
    service: IUserService = Depends(get_user_service),
):
    """Register a new user with the USER role."""
    logger.info(f"Processing registration for User: {user_data.username}")
    return service.create_user(user_data)


@router.get("", response_model=UserResponse)
@handle_api_errors("Get user")
def get_current_user(
    username: str = Depends(get_authenticated_username),
    service: IUserService = Depends(get_user_service),
):
    """Profile of the logged in user."""
    return service.get_user_by_username(username)


@router.put("", response_model=UserResponse)
@handle_api_errors("Update user")
def update_current_user(
    user_data: UserUpdateRequest,
    username: str = Depends(get_authenticated_username),
    service: IUserService = Depends(get_user_service),
):
    """Update email and display name of the logged in user."""
    logger.info(f"Processing PUT Request to update User: {username}")
    return service.update_user(username, user_data)


@router.patch("/password", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Change password")
def change_password(
    password_data: PasswordChangeRequest,
    username: str = Depends(get_authenticated_username),
    service: IUserService = Depends(get_user_service),
):
    logger.info(f"Processing password change for User: {username}")
    service.change_password(username, password_data.new_password)
    return Response(status_code=HTTPStatus.NO_CONTENT)
