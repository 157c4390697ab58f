"""
Logging configuration for the application.

One line per record on stdout. Credentials never reach the output: a
filter on the root handlers masks bearer tokens and bcrypt hashes even
if a caller formats one into a message by mistake.
"""

import logging
import re
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

REDACTED = "[redacted]"

_CREDENTIAL_PATTERNS = (
    re.compile(r"(?<=Bearer )[A-Za-z0-9._~+/=-]+"),
    re.compile(r"\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}"),
)


class CredentialRedactingFilter(logging.Filter):
    """Rewrites a record's message with credentials masked."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = message
        for pattern in _CREDENTIAL_PATTERNS:
            redacted = pattern.sub(REDACTED, redacted)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(CredentialRedactingFilter())

    # Access lines would carry every request path; errors still surface.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
