"""Run the API server: ``python -m pbank``."""

import logging

import uvicorn
from sqlalchemy.engine import make_url

from pbank.core.config import settings
from pbank.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Start uvicorn on the configured host and port."""
    configure_logging(level=settings.log_level)
    logger.info(
        "Server is using database: %s",
        make_url(settings.database_url).render_as_string(hide_password=True),
    )
    uvicorn.run(
        "pbank.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
