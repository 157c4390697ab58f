"""
Adapter: Transaction ledger.

Implements TransactionRepository port against the ``transactions`` table.
Rows are only ever inserted and read; never updated or deleted.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from pbank.domain.ledger.entities import Transaction, TransactionType
from pbank.domain.ledger.errors import LedgerStoreError, MalformedRowError
from pbank.domain.ledger.ports import TransactionRepository


def _parse_created_at(value) -> datetime | None:
    """Normalize a store timestamp. SQLite hands back text."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _row_to_transaction(row: Row) -> Transaction:
    """Map a transactions row to the entity, rejecting malformed data."""
    try:
        return Transaction(
            id=UUID(row.id),
            user_id=UUID(row.user_id),
            stock_id=UUID(row.stock_id),
            quantity=int(row.quantity),
            transaction_type=TransactionType(row.transaction_type),
            created_at=_parse_created_at(row.created_at),
        )
    except (TypeError, ValueError) as exc:
        raise MalformedRowError(f"malformed transactions row {row.id!r}") from exc


class TransactionRepositoryAdapter(TransactionRepository):
    """SQL adapter for the transactions table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, transaction: Transaction) -> None:
        """Insert one transaction. The store assigns ``created_at``."""
        query = text(
            """
            INSERT INTO transactions (id, user_id, stock_id, quantity, transaction_type)
            VALUES (:id, :user_id, :stock_id, :quantity, :transaction_type)
            """
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    query,
                    {
                        "id": str(transaction.id),
                        "user_id": str(transaction.user_id),
                        "stock_id": str(transaction.stock_id),
                        "quantity": transaction.quantity,
                        "transaction_type": transaction.transaction_type.value,
                    },
                )
        except SQLAlchemyError as exc:
            raise LedgerStoreError(
                f"failed to record {transaction.transaction_type.value} transaction: "
                f"{type(exc).__name__}"
            ) from exc

    def list_for_user(self, user_id: UUID) -> list[Transaction]:
        """Return the user's transactions, newest first."""
        query = text(
            """
            SELECT id, user_id, stock_id, quantity, transaction_type, created_at
            FROM transactions
            WHERE user_id = :user_id
            ORDER BY created_at DESC
            """
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query, {"user_id": str(user_id)}).fetchall()
        except SQLAlchemyError as exc:
            raise LedgerStoreError(
                f"failed to query transactions: {type(exc).__name__}"
            ) from exc

        return [_row_to_transaction(row) for row in rows]
