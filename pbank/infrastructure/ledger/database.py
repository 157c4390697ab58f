"""
Ledger store engine and schema.

Builds the single SQLAlchemy engine shared by every request. The engine
owns a bounded connection pool; repositories check a connection out for
one statement and return it immediately.
"""

import logging

from sqlalchemy import event, text
from sqlalchemy.engine import Engine, create_engine

logger = logging.getLogger(__name__)

# SQLite's CURRENT_TIMESTAMP only has second resolution, which makes
# newest-first ordering ambiguous for rows written in the same second.
_SQLITE_NOW = "(strftime('%Y-%m-%d %H:%M:%f', 'now'))"

_SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        username TEXT NOT NULL UNIQUE,
        hashed_password TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS stocks (
        id TEXT PRIMARY KEY,
        symbol TEXT NOT NULL UNIQUE,
        price REAL NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        stock_id TEXT NOT NULL,
        quantity INTEGER NOT NULL,
        transaction_type TEXT CHECK(transaction_type IN ('buy', 'sell')),
        created_at TEXT DEFAULT {now},
        FOREIGN KEY(user_id) REFERENCES users(id),
        FOREIGN KEY(stock_id) REFERENCES stocks(id)
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_user_created
        ON transactions (user_id, created_at)
    """,
)


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def create_db_engine(database_url: str, pool_size: int = 5) -> Engine:
    """Build the pooled engine for the ledger store.

    The pool never grows past ``pool_size``; a request that finds every
    connection checked out waits on the pool's default checkout timeout.

    Args:
        database_url: SQLAlchemy URL, e.g. ``sqlite:///./pbank.db``.
        pool_size: Maximum number of simultaneously open connections.

    Returns:
        A configured Engine.
    """
    connect_args = {"check_same_thread": False} if _is_sqlite(database_url) else {}
    engine = create_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=0,
        pool_pre_ping=True,
        connect_args=connect_args,
    )

    if _is_sqlite(database_url):

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_schema(engine: Engine) -> None:
    """Create the ledger tables if they do not exist yet.

    Failures propagate: a store that cannot be prepared is fatal at startup.
    """
    now = _SQLITE_NOW if engine.dialect.name == "sqlite" else "CURRENT_TIMESTAMP"
    with engine.begin() as conn:
        for statement in _SCHEMA_STATEMENTS:
            conn.execute(text(statement.replace("{now}", now)))
    logger.info("Ledger schema ready on %s", engine.url.render_as_string(hide_password=True))
