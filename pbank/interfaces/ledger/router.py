"""
FastAPI router for the ledger bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from pbank.application.ledger.dtos import (
    GetStockQuery,
    LoginCommand,
    RecordTransactionCommand,
)
from pbank.application.ledger.get_stock import GetStockUseCase
from pbank.application.ledger.list_transactions import ListTransactionsUseCase
from pbank.application.ledger.login import LoginUseCase
from pbank.application.ledger.record_transaction import RecordTransactionUseCase
from pbank.domain.ledger.entities import Principal, TransactionType
from pbank.interfaces.ledger.dependencies import (
    get_list_transactions_use_case,
    get_login_use_case,
    get_principal,
    get_record_transaction_use_case,
    get_stock_use_case,
)
from pbank.interfaces.ledger.schemas import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    StockResponse,
    TransactionRequest,
    TransactionResponse,
)

router = APIRouter(tags=["ledger"])

_UNAUTHORIZED = {401: {"model": ErrorResponse}}
_AUTHORIZED_WRITE = {401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post(
    "/login",
    response_model=LoginResponse,
    responses=_UNAUTHORIZED,
    summary="Exchange username and password for a bearer token",
)
def login(
    body: LoginRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
) -> LoginResponse:
    result = use_case.execute(
        LoginCommand(username=body.username, password=body.hashed_password)
    )
    return LoginResponse(token=result.token)


def _record(
    body: TransactionRequest,
    transaction_type: TransactionType,
    principal: Principal,
    use_case: RecordTransactionUseCase,
) -> TransactionResponse:
    result = use_case.execute(
        principal,
        RecordTransactionCommand(
            stock_id=body.stock_id,
            quantity=body.quantity,
            transaction_type=transaction_type,
        ),
    )
    return TransactionResponse(**asdict(result))


@router.post(
    "/buy",
    response_model=TransactionResponse,
    response_model_exclude_none=True,
    responses=_AUTHORIZED_WRITE,
    summary="Record a buy for the authenticated user",
)
def buy_stock(
    body: TransactionRequest,
    principal: Principal = Depends(get_principal),
    use_case: RecordTransactionUseCase = Depends(get_record_transaction_use_case),
) -> TransactionResponse:
    return _record(body, TransactionType.BUY, principal, use_case)


@router.post(
    "/sell",
    response_model=TransactionResponse,
    response_model_exclude_none=True,
    responses=_AUTHORIZED_WRITE,
    summary="Record a sell for the authenticated user",
    description="Sells are not checked against the user's holdings.",
)
def sell_stock(
    body: TransactionRequest,
    principal: Principal = Depends(get_principal),
    use_case: RecordTransactionUseCase = Depends(get_record_transaction_use_case),
) -> TransactionResponse:
    return _record(body, TransactionType.SELL, principal, use_case)


@router.get(
    "/transactions",
    response_model=list[TransactionResponse],
    responses=_AUTHORIZED_WRITE,
    summary="List the authenticated user's transactions, newest first",
)
def get_transactions(
    principal: Principal = Depends(get_principal),
    use_case: ListTransactionsUseCase = Depends(get_list_transactions_use_case),
) -> list[TransactionResponse]:
    return [TransactionResponse(**asdict(tx)) for tx in use_case.execute(principal)]


@router.get(
    "/stocks/{symbol}",
    response_model=StockResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Look up a stock by ticker symbol",
)
def get_stock(
    symbol: str,
    use_case: GetStockUseCase = Depends(get_stock_use_case),
) -> StockResponse:
    result = use_case.execute(GetStockQuery(symbol=symbol))
    return StockResponse(id=result.id, symbol=result.symbol, price=result.price)
