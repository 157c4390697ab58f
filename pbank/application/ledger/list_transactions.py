"""
Use case: List the authenticated principal's transactions.

Input: Principal
Output: list[TransactionResult], newest first
Side effects: None (read-only query).
Failure cases: LedgerStoreError.
"""

import logging

from pbank.application.ledger.dtos import TransactionResult
from pbank.domain.ledger.entities import Principal
from pbank.domain.ledger.ports import TransactionRepository

logger = logging.getLogger(__name__)


class ListTransactionsUseCase:
    """Fetches every transaction owned by the caller."""

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def execute(self, principal: Principal) -> list[TransactionResult]:
        """Run the list transactions use case.

        Args:
            principal: Whose transactions to return.

        Returns:
            The caller's transactions ordered by creation time descending.
            Empty if none exist.
        """
        transactions = self._transaction_repo.list_for_user(principal.user_id)
        logger.debug(
            "Listed %d transactions for user=%s", len(transactions), principal.user_id
        )

        return [
            TransactionResult(
                id=tx.id,
                user_id=tx.user_id,
                stock_id=tx.stock_id,
                quantity=tx.quantity,
                transaction_type=tx.transaction_type.value,
                created_at=tx.created_at,
            )
            for tx in transactions
        ]
