"""
Password Hasher

bcrypt based hashing for stored credentials.
"""

import base64
import hashlib
import logging

import bcrypt

logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    Hash and verify passwords with bcrypt.

    Passwords are pre-hashed with SHA-256 and base64 encoded before bcrypt,
    which keeps every input under bcrypt's 72-byte limit and free of NUL bytes.
    """

    def __init__(self, rounds: int = 12):
        """
        Args:
            rounds: bcrypt work factor (4-31)
        """
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self.rounds = rounds

    @staticmethod
    def _prehash(password: str) -> bytes:
        digest = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(digest)

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._prehash(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check password against a stored hash.

        Returns:
            False for a mismatch or a malformed stored hash
        """
        try:
            return bcrypt.checkpw(self._prehash(password), password_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False
