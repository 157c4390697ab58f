"""
Pydantic schemas for ledger API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

# Quantities travel as 32-bit signed integers; sign and zero are not checked.
QUANTITY_MIN = -(2**31)
QUANTITY_MAX = 2**31 - 1


class LoginRequest(BaseModel):
    """Request schema for the login endpoint.

    Attributes:
        username: Login name.
        hashed_password: Plaintext password candidate. The field name is
            part of the public contract and is kept as is.
    """

    username: str
    hashed_password: str


class LoginResponse(BaseModel):
    """Response schema for the login endpoint."""

    token: str


class TransactionRequest(BaseModel):
    """Request schema for buy and sell endpoints.

    There is deliberately no user field: the owner always comes from
    the bearer token.
    """

    stock_id: UUID
    quantity: int = Field(..., ge=QUANTITY_MIN, le=QUANTITY_MAX)


class TransactionResponse(BaseModel):
    """A transaction record.

    ``created_at`` is only present on records read back from the ledger.
    """

    id: UUID
    user_id: UUID
    stock_id: UUID
    quantity: int
    transaction_type: Literal["buy", "sell"]
    created_at: datetime | None = None


class StockResponse(BaseModel):
    """Response schema for the stock lookup endpoint."""

    id: UUID
    symbol: str
    price: float


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
