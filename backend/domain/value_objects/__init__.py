"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- Role: An authority granted to a user (USER, ADMIN)
"""

from .role import Role

__all__ = ["Role"]
