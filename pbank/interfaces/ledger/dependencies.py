"""
Dependency injection for the ledger bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection. The engine and
token authority are built once in ``create_app`` and kept on
``app.state``; adapters around them are cheap and built per request.
"""

from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.engine import Engine

from pbank.application.ledger.authorize_request import AuthorizeRequestUseCase
from pbank.application.ledger.get_stock import GetStockUseCase
from pbank.application.ledger.list_transactions import ListTransactionsUseCase
from pbank.application.ledger.login import LoginUseCase
from pbank.application.ledger.record_transaction import RecordTransactionUseCase
from pbank.domain.ledger.entities import Principal
from pbank.domain.ledger.ports import PasswordHasher, TokenAuthority
from pbank.infrastructure.ledger.stock_repository import StockRepositoryAdapter
from pbank.infrastructure.ledger.transaction_repository import (
    TransactionRepositoryAdapter,
)
from pbank.infrastructure.ledger.user_repository import UserRepositoryAdapter


def get_engine(request: Request) -> Engine:
    """Return the process-wide pooled store engine."""
    return request.app.state.engine


def get_token_authority(request: Request) -> TokenAuthority:
    """Return the token authority built at startup."""
    return request.app.state.token_authority


def get_password_hasher(request: Request) -> PasswordHasher:
    """Return the password hasher built at startup."""
    return request.app.state.password_hasher


def get_principal(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    token_authority: TokenAuthority = Depends(get_token_authority),
) -> Principal:
    """Authorize the request and attach its principal to the request scope.

    Raises:
        UnauthorizedError: Mapped to a generic 401 by the error handlers.
    """
    principal = AuthorizeRequestUseCase(token_authority).execute(authorization)
    request.state.principal = principal
    return principal


def get_login_use_case(
    engine: Engine = Depends(get_engine),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_authority: TokenAuthority = Depends(get_token_authority),
) -> LoginUseCase:
    """Build LoginUseCase with its infrastructure dependencies."""
    return LoginUseCase(
        user_repo=UserRepositoryAdapter(engine),
        password_hasher=password_hasher,
        token_authority=token_authority,
    )


def get_record_transaction_use_case(
    engine: Engine = Depends(get_engine),
) -> RecordTransactionUseCase:
    """Build RecordTransactionUseCase with its infrastructure dependencies."""
    return RecordTransactionUseCase(
        transaction_repo=TransactionRepositoryAdapter(engine),
    )


def get_list_transactions_use_case(
    engine: Engine = Depends(get_engine),
) -> ListTransactionsUseCase:
    """Build ListTransactionsUseCase with its infrastructure dependencies."""
    return ListTransactionsUseCase(
        transaction_repo=TransactionRepositoryAdapter(engine),
    )


def get_stock_use_case(engine: Engine = Depends(get_engine)) -> GetStockUseCase:
    """Build GetStockUseCase with its infrastructure dependencies."""
    return GetStockUseCase(stock_repo=StockRepositoryAdapter(engine))
