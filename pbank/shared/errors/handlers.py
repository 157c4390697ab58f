"""
Centralized error handlers for FastAPI.

Maps ledger domain errors to HTTP responses.
No stack traces or internal details are exposed to clients: every
authentication failure looks the same from the outside.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pbank.domain.ledger.errors import (
    LedgerDomainError,
    LedgerStoreError,
    StockNotFoundError,
    UnauthorizedError,
)
from pbank.shared.security.headers import apply_secure_headers

logger = logging.getLogger(__name__)

HTTP_401 = 401
HTTP_404 = 404
HTTP_500 = 500

UNAUTHORIZED_MESSAGE = "Unauthorized"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(
    status_code: int, error: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(
        request: Request, exc: UnauthorizedError
    ) -> JSONResponse:
        """Reject with a generic 401. The cause stays in the server log."""
        logger.info("Unauthorized %s %s: %s", request.method, request.url.path, exc.detail)
        return _error_response(
            HTTP_401, UNAUTHORIZED_MESSAGE, headers={"WWW-Authenticate": "Bearer"}
        )

    @app.exception_handler(StockNotFoundError)
    async def handle_stock_not_found(
        _request: Request, exc: StockNotFoundError
    ) -> JSONResponse:
        """Handle unknown stock symbols."""
        logger.warning("Stock not found: %s", exc.symbol)
        return _error_response(HTTP_404, "Stock not found")

    @app.exception_handler(LedgerStoreError)
    async def handle_store_error(
        _request: Request, exc: LedgerStoreError
    ) -> JSONResponse:
        """Handle store failures and malformed stored data."""
        logger.error("Ledger store error: %s", exc.reason)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(LedgerDomainError)
    async def handle_ledger_domain(
        _request: Request, exc: LedgerDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled ledger domain errors."""
        logger.error("Unhandled ledger domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals.

        Starlette runs this handler outside the middleware stack, so the
        secure headers are applied here.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return apply_secure_headers(_error_response(HTTP_500, INTERNAL_ERROR_MESSAGE))
