"""Use cases for the ledger bounded context."""
