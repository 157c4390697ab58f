"""
Ledger bounded context — domain layer.

- Users, stocks and append-only buy/sell transactions
- The authenticated principal of a request
- Ports for the store, password hashing and bearer tokens
"""
