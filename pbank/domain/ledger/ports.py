"""
Port interfaces (ABCs) for the ledger bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from pbank.domain.ledger.entities import Stock, Transaction, User


class UserRepository(ABC):
    """Port for looking up users."""

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        """Return the user with this username, or None if absent.

        Raises:
            LedgerStoreError: If the store query fails.
        """
        raise NotImplementedError


class StockRepository(ABC):
    """Port for reading the stock catalog."""

    @abstractmethod
    def get_by_symbol(self, symbol: str) -> Optional[Stock]:
        """Return the stock listed under ``symbol``, or None if absent.

        Raises:
            LedgerStoreError: If the store query fails or the row is malformed.
        """
        raise NotImplementedError


class TransactionRepository(ABC):
    """Port for the append-only transaction ledger."""

    @abstractmethod
    def add(self, transaction: Transaction) -> None:
        """Insert a new transaction row.

        The store assigns ``created_at`` and enforces that the user
        and stock references exist.

        Raises:
            LedgerStoreError: If the insert is rejected or fails.
        """
        raise NotImplementedError

    @abstractmethod
    def list_for_user(self, user_id: UUID) -> list[Transaction]:
        """Return every transaction owned by ``user_id``, newest first.

        Raises:
            LedgerStoreError: If the query fails or a row is malformed.
        """
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of ``password``."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, hashed_password: str) -> bool:
        """Return True if ``password`` matches ``hashed_password``.

        An unusable stored hash is a mismatch, not an error.
        """
        raise NotImplementedError


class TokenAuthority(ABC):
    """Port for minting and verifying bearer credentials."""

    @abstractmethod
    def issue(self, user_id: UUID) -> str:
        """Return a signed credential asserting ``user_id`` as subject."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> Optional[str]:
        """Return the subject of a valid credential, or None.

        Bad signatures, malformed tokens and expired tokens all
        yield None; the cause is never returned to the caller.
        """
        raise NotImplementedError
