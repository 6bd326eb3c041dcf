"""
ToDoList API endpoints

Every route requires HTTP Basic authentication; the authenticated username
is passed explicitly to the service on each call.
"""
from fastapi import APIRouter, Depends, Response
from typing import List
import logging

from constants import HTTPStatus
from dependencies import get_authenticated_username, get_todo_list_service
from dtos.request import ToDoListRequest, TaskRequest
from dtos.response import ToDoListResponse
from services.interfaces import IToDoListService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_NOT_FOUND = {"description": "ToDoList with id:{id} belonging to User:{username} not found"}
INVALID_DATA = {"description": "Invalid data: { {property} : {constraint_message} }"}


@router.get("/all", response_model=List[ToDoListResponse])
@handle_api_errors("Get all to_do_lists")
def get_all_lists(
    username: str = Depends(get_authenticated_username),
    service: IToDoListService = Depends(get_todo_list_service),
):
    """Find all lists belonging to the logged in user, ordered by id."""
    logger.debug(f"Processing GET Request for all ToDoLists belonging to User: {username}")
    return service.list_all_for_user(username)


@router.get(
    "/{list_id}",
    response_model=ToDoListResponse,
    responses={HTTPStatus.NOT_FOUND: LIST_NOT_FOUND},
)
@handle_api_errors("Get to_do_list")
def get_list(
    list_id: int,
    username: str = Depends(get_authenticated_username),
    service: IToDoListService = Depends(get_todo_list_service),
):
    """Find a list by id."""
    logger.info(f"Processing GET Request for ToDoList (id: {list_id})")
    return service.get_list_by_id_for_user(list_id, username)


@router.post(
    "",
    response_model=ToDoListResponse,
    status_code=HTTPStatus.CREATED,
    responses={HTTPStatus.BAD_REQUEST: INVALID_DATA},
)
@handle_api_errors("Create to_do_list")
def create_list(
    list_data: ToDoListRequest,
    username: str = Depends(get_authenticated_username),
    service: IToDoListService = Depends(get_todo_list_service),
):
    """Create a new list owned by the logged in user."""
    logger.info("Processing POST Request for new ToDoList")
    return service.create_list(list_data, username)


@router.put(
    "/{list_id}",
    response_model=ToDoListResponse,
    responses={HTTPStatus.NOT_FOUND: LIST_NOT_FOUND, HTTPStatus.BAD_REQUEST: INVALID_DATA},
)
@handle_api_errors("Update to_do_list")
def update_list(
    list_id: int,
    list_data: ToDoListRequest,
    username: str = Depends(get_authenticated_username),
    service: IToDoListService = Depends(get_todo_list_service),
):
    """
    Update a list.

    Any fields provided are updated, except id, owner and created_at.
    """
    logger.info(f"Processing PUT Request to update ToDoList (id: {list_id})")
    return service.update_list(list_id, list_data, username)


@router.delete(
    "/{list_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    responses={HTTPStatus.NOT_FOUND: LIST_NOT_FOUND},
)
@handle_api_errors("Delete to_do_list")
def delete_list(
    list_id: int,
    username: str = Depends(get_authenticated_username),
    service: IToDoListService = Depends(get_todo_list_service),
):
    """Delete a list and all of its tasks."""
    logger.info(f"Processing DELETE Request for ToDoList (id: {list_id})")
    service.delete_list(list_id, username)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.patch(
    "/{list_id}/active/{active}",
    response_model=ToDoListResponse,
    responses={HTTPStatus.NOT_FOUND: LIST_NOT_FOUND},
)
@handle_api_errors("Set to_do_list active")
def set_active(
    list_id: int,
    active: bool,
    username: str = Depends(get_authenticated_username),
    service: IToDoListService = Depends(get_todo_list_service),
):
    """Change whether a list is active."""
    logger.info(f"Setting Active of ToDoList (id: {list_id}) to {active}")
    return service.set_active(list_id, username, active)


@router.patch(
    "/{list_id}/task/add",
    response_model=ToDoListResponse,
    responses={HTTPStatus.NOT_FOUND: LIST_NOT_FOUND, HTTPStatus.BAD_REQUEST: INVALID_DATA},
)
@handle_api_errors("Add task to to_do_list")
def add_task(
    list_id: int,
    task_data: TaskRequest,
    username: str = Depends(get_authenticated_username),
    service: IToDoListService = Depends(get_todo_list_service),
):
    """Add a new task to a list. The task is provided in the request body."""
    logger.info(f"Processing PATCH Request to add new Task (name: {task_data.name}) to ToDoList (id: {list_id})")
    return service.add_task(list_id, username, task_data)


@router.patch(
    "/{list_id}/task/remove/{task_id}",
    response_model=ToDoListResponse,
    responses={
        HTTPStatus.NOT_FOUND: {
            "description": "ToDoList not found, or ToDoList with id:{list_id} does not contain Task with id:{task_id}"
        }
    },
)
@handle_api_errors("Remove task from to_do_list")
def remove_task(
    list_id: int,
    task_id: int,
    username: str = Depends(get_authenticated_username),
    service: IToDoListService = Depends(get_todo_list_service),
):
    """Delete a task from a list."""
    logger.info(f"Removing Task with id {task_id} from ToDoList with id {list_id}")
    return service.remove_task(list_id, username, task_id)
