"""
Internal DTOs

DTOs for communication between the service layer and the authentication
layer. These are not exposed to external APIs.
"""

from .auth_dto import UserCredentials

__all__ = ["UserCredentials"]
