"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
application: route prefixes, HTTP status codes and validation limits.
"""
from config.app_config import SERVER_HOST, SERVER_PORT


class ServerConfig:
    """Server configuration constants"""

    HOST = SERVER_HOST
    PORT = SERVER_PORT

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class ApiRoutes:
    """Route prefixes for the versioned API"""

    V1 = "/api/v1"
    LIST = f"{V1}/list"
    USER = f"{V1}/user"
    HEALTH = "/api/health"


class ValidationLimits:
    """Field limits enforced by request DTOs and services"""

    TITLE_MAX_LENGTH = 100
    TASK_NAME_MAX_LENGTH = 100
    DESCRIPTION_MAX_LENGTH = 500

    USERNAME_MIN_LENGTH = 3
    USERNAME_MAX_LENGTH = 50
    USERNAME_PATTERN = r"^[A-Za-z0-9._-]+$"

    PASSWORD_MIN_LENGTH = 8
    PASSWORD_MAX_LENGTH = 128
    PASSWORD_PATTERN = r"^[\x20-\x7e]+$"

    EMAIL_MAX_LENGTH = 254
    NAME_MAX_LENGTH = 100


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
