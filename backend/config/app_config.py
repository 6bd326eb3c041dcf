"""
Runtime Configuration

Reads deployment settings from environment variables once at import time.

Variables:
- TODO_API_DATABASE_URL: SQLAlchemy database URL
- TODO_API_LOG_DIR: Directory for the rotating log file (empty disables file logging)
- TODO_API_LOG_LEVEL: Root log level name
- TODO_API_BCRYPT_ROUNDS: bcrypt work factor for password hashing
- TODO_API_HOST / TODO_API_PORT: Bind address for uvicorn
- TODO_API_CORS_ORIGINS: Comma-separated list of allowed CORS origins
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

APP_HOME = Path.home() / ".todo-api"


def _get_int(name: str, default: int) -> int:
    """Read an integer variable, falling back to default on bad input."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {name}: {raw!r}")
        return default


def get_database_url() -> str:
    """
    Get the database URL.

    Returns:
        TODO_API_DATABASE_URL if set, otherwise a SQLite file under ~/.todo-api
    """
    url = os.environ.get("TODO_API_DATABASE_URL", "").strip()
    if url:
        return url
    return f"sqlite:///{APP_HOME / 'todo.db'}"


def get_log_dir() -> Path | None:
    """
    Get the log directory.

    An explicitly empty TODO_API_LOG_DIR disables file logging.
    """
    raw = os.environ.get("TODO_API_LOG_DIR")
    if raw is None:
        return APP_HOME / "logs"
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_cors_origins() -> list[str]:
    raw = os.environ.get("TODO_API_CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


DATABASE_URL = get_database_url()
LOG_DIR = get_log_dir()
LOG_LEVEL = os.environ.get("TODO_API_LOG_LEVEL", "INFO").upper()
BCRYPT_ROUNDS = _get_int("TODO_API_BCRYPT_ROUNDS", 12)
SERVER_HOST = os.environ.get("TODO_API_HOST", "0.0.0.0")
SERVER_PORT = _get_int("TODO_API_PORT", 8080)
CORS_ORIGINS = get_cors_origins()
