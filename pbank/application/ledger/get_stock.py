"""
Use case: Look up a stock by ticker symbol.

Input: GetStockQuery (symbol)
Output: StockResult
Side effects: None (read-only query).
Failure cases: StockNotFoundError, for an unknown symbol and for a failed
lookup alike. MalformedRowError when the stored row cannot be decoded.
"""

import logging

from pbank.application.ledger.dtos import GetStockQuery, StockResult
from pbank.domain.ledger.errors import (
    LedgerStoreError,
    MalformedRowError,
    StockNotFoundError,
)
from pbank.domain.ledger.ports import StockRepository

logger = logging.getLogger(__name__)


class GetStockUseCase:
    """Fetches a single stock from the catalog."""

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def execute(self, query: GetStockQuery) -> StockResult:
        """Run the get stock use case.

        Raises:
            StockNotFoundError: If the symbol is unknown or the lookup failed.
            MalformedRowError: If the stored row is corrupt.
        """
        logger.debug("Looking up stock symbol=%s", query.symbol)

        try:
            stock = self._stock_repo.get_by_symbol(query.symbol)
        except MalformedRowError:
            raise
        except LedgerStoreError as exc:
            logger.warning("Stock lookup failed for %s: %s", query.symbol, exc.reason)
            raise StockNotFoundError(query.symbol) from exc

        if stock is None:
            raise StockNotFoundError(query.symbol)

        return StockResult(id=stock.id, symbol=stock.symbol, price=stock.price)
