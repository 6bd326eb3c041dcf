"""
Logging Utilities

Configures application logging and provides a decorator that records the
start and outcome of service operations.
"""

import inspect
import logging
import sys
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from exceptions import ApplicationError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Arguments copied into operation log lines when a decorated call receives them
CONTEXT_ARGUMENTS = ("list_id", "task_id", "username", "active")


def configure_logging(log_dir: Optional[Path], level: str = "INFO") -> Optional[Path]:
    """
    Configure the root logger with a console handler and, when log_dir is
    given, a rotating file handler (10MB per file, keep 5 backups).

    Safe to call more than once; handlers installed by a previous call are
    replaced.

    Args:
        log_dir: Directory for todo-api.log, or None for console only
        level: Log level name

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    log_formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_todo_api_handler", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(log_level)
    console_handler._todo_api_handler = True
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "todo-api.log"
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(log_level)
        file_handler._todo_api_handler = True
        root_logger.addHandler(file_handler)

    return log_file


def _describe_call(func, args, kwargs) -> str:
    """Render the identifying arguments of a call, e.g. 'list_id=1, username=alice'."""
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        return ""
    parts = [
        f"{name}={bound.arguments[name]}"
        for name in CONTEXT_ARGUMENTS
        if name in bound.arguments
    ]
    return ", ".join(parts)


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end.

    Domain errors (ApplicationError) are expected outcomes and are logged
    as warnings without a traceback. Anything else is logged with one.
    Exceptions are always re-raised.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("create_list")
        def create_list(self, list_data, username):
            ...
    """
    def decorator(func):
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            context = _describe_call(func, args, kwargs)
            logger.debug(f"Starting {operation_name} ({context})")
            try:
                result = func(*args, **kwargs)
            except ApplicationError as e:
                logger.warning(f"{operation_name} rejected ({context}): {e.message}")
                raise
            except Exception as e:
                logger.error(f"Failed {operation_name} ({context}): {e}", exc_info=True)
                raise
            logger.info(f"Completed {operation_name} ({context})")
            return result

        return wrapper

    return decorator
