"""
Domain-specific errors for the ledger bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class LedgerDomainError(Exception):
    """Base error for all ledger domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnauthorizedError(LedgerDomainError):
    """Raised for any authentication or authorization failure.

    Covers missing or malformed credentials, bad signatures, expired
    tokens, unknown users and wrong passwords alike. ``detail`` records
    the actual cause for server logs only; clients always receive the
    same generic message.
    """

    def __init__(self, detail: str) -> None:
        super().__init__("Unauthorized")
        self.detail = detail


class StockNotFoundError(LedgerDomainError):
    """Raised when no stock is registered under a ticker symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Stock not found: {symbol}")
        self.symbol = symbol


class LedgerStoreError(LedgerDomainError):
    """Raised when the store fails or is unreachable."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Ledger store failure: {reason}")
        self.reason = reason


class MalformedRowError(LedgerStoreError):
    """Raised when a stored row cannot be mapped to an entity."""
