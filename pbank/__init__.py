"""
PBank — brokerage ledger API.

Application package root. This is a small monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - ledger: Authentication, bearer tokens, buy/sell transaction records.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: Use cases, DTOs, request authorization.
    - infrastructure: Adapters (SQL store, JWT, bcrypt) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security headers, logging).
"""
