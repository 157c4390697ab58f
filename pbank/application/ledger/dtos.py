"""
Data Transfer Objects for the ledger application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pbank.domain.ledger.entities import TransactionType


@dataclass(frozen=True)
class LoginCommand:
    """Input DTO for exchanging a username and password for a token.

    Attributes:
        username: Login name to look up.
        password: Plaintext candidate checked against the stored hash.
    """

    username: str
    password: str

    def __repr__(self) -> str:
        return f"LoginCommand(username={self.username!r})"


@dataclass(frozen=True)
class LoginResult:
    """Output DTO carrying a freshly issued bearer token."""

    token: str


@dataclass(frozen=True)
class RecordTransactionCommand:
    """Input DTO for a buy or sell.

    Attributes:
        stock_id: Stock being bought or sold.
        quantity: Signed share count, recorded as given.
        transaction_type: BUY or SELL.
    """

    stock_id: UUID
    quantity: int
    transaction_type: TransactionType


@dataclass(frozen=True)
class TransactionResult:
    """Output DTO for a single transaction record.

    ``created_at`` is only known for rows read back from the store.
    """

    id: UUID
    user_id: UUID
    stock_id: UUID
    quantity: int
    transaction_type: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class GetStockQuery:
    """Input DTO for looking up a stock by ticker."""

    symbol: str


@dataclass(frozen=True)
class StockResult:
    """Output DTO for a stock record."""

    id: UUID
    symbol: str
    price: float
