"""
Shared fixtures for the ledger test suite.

Stores are throwaway SQLite files built through the real engine
factory, so foreign keys and pooling behave as in production.
"""

from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.engine import Engine

from pbank.core.config import Settings
from pbank.infrastructure.ledger.database import create_db_engine, create_schema
from pbank.infrastructure.ledger.password_hasher import BcryptPasswordHasher
from pbank.main import create_app

TEST_SECRET = "test-signing-secret"

# Low cost factor keeps hashing fast; verification reads the cost from the hash.
fast_hasher = BcryptPasswordHasher(rounds=4)


def insert_user(engine: Engine, username: str, password: str) -> UUID:
    """Create a user row with a bcrypt hash of ``password``."""
    user_id = uuid4()
    with engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO users (id, username, hashed_password) "
                "VALUES (:id, :username, :hashed_password)"
            ),
            {
                "id": str(user_id),
                "username": username,
                "hashed_password": fast_hasher.hash(password),
            },
        )
    return user_id


def insert_stock(engine: Engine, symbol: str, price: float) -> UUID:
    """Create a stock row."""
    stock_id = uuid4()
    with engine.begin() as conn:
        conn.execute(
            text("INSERT INTO stocks (id, symbol, price) VALUES (:id, :symbol, :price)"),
            {"id": str(stock_id), "symbol": symbol, "price": price},
        )
    return stock_id


@pytest.fixture
def engine(tmp_path) -> Engine:
    """A schema-initialized store on a temporary SQLite file."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'api.db'}",
        jwt_secret=TEST_SECRET,
        log_level="WARNING",
    )


@pytest.fixture
def client(settings) -> TestClient:
    """A client for a fully wired app; the lifespan creates the schema."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def app_engine(client) -> Engine:
    return client.app.state.engine
