import logging

import pytest
from fastapi import HTTPException

from exceptions import (
    ApplicationError,
    DatabaseError,
    TaskNotFoundError,
    ToDoListNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from utils.error_handlers import handle_api_errors, to_http_exception
from utils.logging_utils import log_operation


@pytest.mark.parametrize("error,status", [
    (ToDoListNotFoundError(1, "alice"), 404),
    (TaskNotFoundError(1, 2), 404),
    (UserNotFoundError("alice"), 404),
    (ValidationError("bad", {"title": "must not be blank"}), 400),
    (DatabaseError("create_list", "create_list could not be saved"), 500),
    (ApplicationError("boom"), 500),
    (RuntimeError("unexpected"), 500),
])
def test_status_mapping(error, status):
    assert to_http_exception("Operation", error).status_code == status


def test_validation_detail_carries_fields():
    http_error = to_http_exception("Create", ValidationError("Invalid data", {"title": "must not be null"}))

    assert http_error.detail == {"message": "Invalid data", "invalid_fields": {"title": "must not be null"}}


def test_unexpected_error_hides_internals():
    http_error = to_http_exception("Create", RuntimeError("secret connection string"))

    assert "secret" not in http_error.detail


def test_decorator_translates_sync_errors():
    @handle_api_errors("Lookup")
    def lookup():
        raise TaskNotFoundError(3, 4)

    with pytest.raises(HTTPException) as exc_info:
        lookup()

    assert exc_info.value.status_code == 404


def test_decorator_passes_http_exceptions_through():
    @handle_api_errors("Lookup")
    def lookup():
        raise HTTPException(status_code=403, detail="Access denied")

    with pytest.raises(HTTPException) as exc_info:
        lookup()

    assert exc_info.value.status_code == 403


def test_log_operation_records_context_and_reraises(caplog):
    @log_operation("set_active")
    def set_active(list_id, username, active):
        raise ToDoListNotFoundError(list_id, username)

    with caplog.at_level(logging.INFO):
        with pytest.raises(ToDoListNotFoundError):
            set_active(5, "bob", active=True)

    warning = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warning) == 1
    assert "list_id=5, username=bob, active=True" in warning[0].getMessage()
    assert warning[0].exc_info is None
