"""
Infrastructure adapters for the ledger bounded context.

Each adapter implements a domain port (ABC).
"""
