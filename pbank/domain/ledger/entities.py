"""
Domain entities for the ledger bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID


class TransactionType(Enum):
    """Kind of a recorded transaction."""

    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class User:
    """A registered user. Created out of band, never mutated here.

    Attributes:
        id: Globally unique user identity.
        username: Unique login name.
        hashed_password: Salted one-way hash of the user's password.
    """

    id: UUID
    username: str
    hashed_password: str

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"


@dataclass(frozen=True)
class Stock:
    """A listed stock with its current price."""

    id: UUID
    symbol: str
    price: float


@dataclass(frozen=True)
class Transaction:
    """An append-only buy or sell record.

    Attributes:
        id: Fresh identity generated per write.
        user_id: Owner of the transaction.
        stock_id: Stock the transaction refers to.
        quantity: Signed share count, recorded as given.
        transaction_type: BUY or SELL.
        created_at: Assigned by the store; None until read back.
    """

    id: UUID
    user_id: UUID
    stock_id: UUID
    quantity: int
    transaction_type: TransactionType
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Principal:
    """The authenticated identity a request acts as.

    Derived once from a verified bearer token, never from a request body.
    """

    user_id: UUID
