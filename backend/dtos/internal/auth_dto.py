"""
Internal Authentication DTOs
"""

from dataclasses import dataclass, field
from typing import List

from domain.value_objects import Role


@dataclass(frozen=True)
class UserCredentials:
    """
    Credentials and authorities for one user.

    Returned by UserService.load_user_for_authentication and consumed only
    by the HTTP Basic dependency.
    """

    username: str
    password_hash: str = field(repr=False)
    authorities: List[str] = field(default_factory=list)

    def has_role(self, role: Role) -> bool:
        return Role.has_role(self.authorities, role)
