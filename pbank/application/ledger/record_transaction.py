"""
Use case: Record a buy or sell for the authenticated principal.

Input: Principal, RecordTransactionCommand (stock_id, quantity, type)
Output: TransactionResult (the fields written)
Side effects: Appends one row to the transaction ledger.
Failure cases: LedgerStoreError (including unknown user or stock references).
"""

import logging
from uuid import uuid4

from pbank.application.ledger.dtos import RecordTransactionCommand, TransactionResult
from pbank.domain.ledger.entities import Principal, Transaction
from pbank.domain.ledger.ports import TransactionRepository

logger = logging.getLogger(__name__)


class RecordTransactionUseCase:
    """Appends a transaction owned by the caller.

    Sells are not checked against prior buys: a sell larger than the
    caller's holdings, or of a stock never bought, is recorded as given.
    Quantity is likewise not checked for sign.
    """

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def execute(
        self, principal: Principal, command: RecordTransactionCommand
    ) -> TransactionResult:
        """Run the record transaction use case.

        Args:
            principal: Owner of the new row. Never taken from the request body.
            command: Stock, quantity and transaction type.

        Returns:
            The recorded transaction, without its store-assigned timestamp.
        """
        transaction = Transaction(
            id=uuid4(),
            user_id=principal.user_id,
            stock_id=command.stock_id,
            quantity=command.quantity,
            transaction_type=command.transaction_type,
        )
        self._transaction_repo.add(transaction)

        logger.info(
            "Recorded %s transaction %s: user=%s stock=%s quantity=%d",
            transaction.transaction_type.value,
            transaction.id,
            transaction.user_id,
            transaction.stock_id,
            transaction.quantity,
        )

        return TransactionResult(
            id=transaction.id,
            user_id=transaction.user_id,
            stock_id=transaction.stock_id,
            quantity=transaction.quantity,
            transaction_type=transaction.transaction_type.value,
        )
