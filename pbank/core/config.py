"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "secretkey"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the ledger store.
        db_pool_size: Maximum number of pooled store connections.
        jwt_secret: Shared secret used to sign bearer tokens.
        server_host: Interface the HTTP server binds to.
        server_port: Port the HTTP server binds to.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "PBank"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./pbank.db"
    db_pool_size: int = 5

    # Falls back to a well-known value when JWT_SECRET is unset.
    jwt_secret: str = DEFAULT_JWT_SECRET

    server_host: str = "127.0.0.1"
    server_port: int = 8080

    @property
    def uses_default_jwt_secret(self) -> bool:
        """Return True when tokens are signed with the built-in default secret."""
        return self.jwt_secret == DEFAULT_JWT_SECRET


settings = Settings()
