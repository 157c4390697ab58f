"""
Adapter: User lookup.

Implements UserRepository port against the ``users`` table.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from pbank.domain.ledger.entities import User
from pbank.domain.ledger.errors import LedgerStoreError, MalformedRowError
from pbank.domain.ledger.ports import UserRepository


class UserRepositoryAdapter(UserRepository):
    """SQL adapter for the users table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_username(self, username: str) -> Optional[User]:
        """Return the user registered under ``username``, or None."""
        query = text(
            """
            SELECT id, username, hashed_password
            FROM users
            WHERE username = :username
            """
        )
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query, {"username": username}).fetchone()
        except SQLAlchemyError as exc:
            raise LedgerStoreError(f"user lookup failed: {type(exc).__name__}") from exc

        if not row:
            return None

        try:
            user_id = UUID(row.id)
        except (TypeError, ValueError) as exc:
            raise MalformedRowError("invalid UUID in users.id") from exc

        return User(id=user_id, username=row.username, hashed_password=row.hashed_password)
