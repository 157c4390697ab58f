"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, ledger)
- Error handlers (centralized domain-to-HTTP mapping)
- Security headers middleware
- Logging configuration
- The pooled store engine, token authority and password hasher

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pbank.core.config import Settings, settings as default_settings
from pbank.infrastructure.ledger.database import create_db_engine, create_schema
from pbank.infrastructure.ledger.password_hasher import BcryptPasswordHasher
from pbank.infrastructure.ledger.token_authority import JwtTokenAuthority
from pbank.interfaces.health import router as health_router
from pbank.interfaces.ledger.router import router as ledger_router
from pbank.shared.errors.handlers import register_error_handlers
from pbank.shared.logging import configure_logging
from pbank.shared.security.headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the store on startup and release the pool on shutdown.

    Schema creation failures propagate and abort startup.
    """
    create_schema(app.state.engine)
    logger.info("Initialized ledger store")

    yield

    app.state.engine.dispose()
    logger.info("Ledger store connection pool closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Configuration to use. Defaults to the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    if settings.uses_default_jwt_secret:
        logger.warning(
            "JWT_SECRET is not set; signing tokens with the built-in default secret"
        )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_db_engine(
        settings.database_url, pool_size=settings.db_pool_size
    )
    app.state.token_authority = JwtTokenAuthority(secret=settings.jwt_secret)
    app.state.password_hasher = BcryptPasswordHasher()

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(ledger_router)

    return app


app = create_app()
