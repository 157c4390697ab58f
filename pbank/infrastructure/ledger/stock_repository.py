"""
Adapter: Stock catalog.

Implements StockRepository port against the ``stocks`` table.
The catalog is read-only from this service.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from pbank.domain.ledger.entities import Stock
from pbank.domain.ledger.errors import LedgerStoreError, MalformedRowError
from pbank.domain.ledger.ports import StockRepository


class StockRepositoryAdapter(StockRepository):
    """SQL adapter for the stocks table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_symbol(self, symbol: str) -> Optional[Stock]:
        """Return the stock listed under ``symbol``, or None."""
        query = text("SELECT id, symbol, price FROM stocks WHERE symbol = :symbol")
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query, {"symbol": symbol}).fetchone()
        except SQLAlchemyError as exc:
            raise LedgerStoreError(f"stock lookup failed: {type(exc).__name__}") from exc

        if not row:
            return None

        try:
            return Stock(id=UUID(row.id), symbol=row.symbol, price=float(row.price))
        except (TypeError, ValueError) as exc:
            raise MalformedRowError(f"malformed stocks row for {symbol}") from exc
