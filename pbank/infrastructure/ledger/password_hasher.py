"""
Adapter: bcrypt password hashing.

Implements PasswordHasher port.
"""

import bcrypt

from pbank.domain.ledger.ports import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashes, as stored in ``users.hashed_password``."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed_password: str) -> bool:
        """Check a plaintext candidate against a stored hash.

        A stored value that is not a bcrypt hash never matches.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), hashed_password.encode("utf-8")
            )
        except ValueError:
            return False
