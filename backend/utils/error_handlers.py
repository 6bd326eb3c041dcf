"""
Error handling decorators and utilities for API endpoints.

Services raise the typed errors from exceptions.py; this module is the one
place that maps them to HTTP status codes and response bodies.
"""

from functools import wraps
from typing import Callable
import inspect
import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from constants import HTTPStatus
from exceptions import (
    ApplicationError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Convert an exception raised by a service into an HTTPException.

    Args:
        operation_name: Human-readable name of the operation
        error: The exception to translate

    Returns:
        HTTPException with the mapped status code and detail
    """
    if isinstance(error, NotFoundError):
        logger.info(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)

    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message} {error.invalid_fields}")
        return HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail={"message": error.message, "invalid_fields": error.invalid_fields}
        )

    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {error.message}"
        )

    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle service errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Add task")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/{id}")
        @handle_api_errors("Get to_do_list")
        def get_list(...):
            return service.get_list_by_id_for_user(id, username)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def _field_path(loc) -> str:
    """Turn a pydantic error location into a dotted field name, dropping 'body'."""
    parts = [str(part) for part in loc if part not in ("body", "path", "query")]
    return ".".join(parts) or "request"


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed request bodies and parameters as 400 with a field map.

    Registered on the app for RequestValidationError, replacing FastAPI's
    default 422 response.
    """
    invalid_fields = {}
    for error in exc.errors():
        invalid_fields.setdefault(_field_path(error.get("loc", ())), error.get("msg", "invalid value"))

    logger.warning(f"{request.method} {request.url.path} - Invalid request data: {invalid_fields}")
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"detail": {"message": "Invalid request data", "invalid_fields": invalid_fields}},
    )
