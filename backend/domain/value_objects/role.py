"""
Role Value Object

Immutable representation of an authority granted to a user.
"""

from enum import Enum
from typing import Iterable


class Role(str, Enum):
    """
    Authority names stored in user_authorities.

    Every route under /api/v1 except registration requires USER.
    """

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def default_roles(cls) -> list["Role"]:
        """Roles granted to a newly registered user."""
        return [cls.USER]

    @classmethod
    def from_string(cls, value: str) -> "Role":
        """
        Create Role from string value.

        Accepts names with or without a "ROLE_" prefix, in any case.

        Raises:
            ValueError: If value is not a known role
        """
        name = value.strip().upper()
        if name.startswith("ROLE_"):
            name = name[len("ROLE_"):]
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Invalid role: {value}")

    @classmethod
    def has_role(cls, authorities: Iterable[str], role: "Role") -> bool:
        """Check whether a collection of authority names grants role."""
        for authority in authorities:
            try:
                if cls.from_string(authority) == role:
                    return True
            except ValueError:
                continue
        return False
