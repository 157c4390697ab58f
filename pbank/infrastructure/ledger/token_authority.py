"""
Adapter: JWT bearer tokens.

Implements TokenAuthority port with HS256-signed JSON Web Tokens.
Issuer and verifier are the same process, so a symmetric key is enough.
There is no revocation list and no refresh: a token stays valid until
its ``exp`` claim passes.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from uuid import UUID

import jwt

from pbank.domain.ledger.ports import TokenAuthority

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=1)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JwtTokenAuthority(TokenAuthority):
    """Mints and verifies ``{sub, exp}`` JWTs with a shared secret.

    Args:
        secret: Signing key. Injected once at startup.
        clock: Returns the current UTC time. Used when issuing.
    """

    def __init__(
        self, secret: str, clock: Callable[[], datetime] = _utc_now
    ) -> None:
        self._secret = secret
        self._clock = clock

    def issue(self, user_id: UUID) -> str:
        """Return a token for ``user_id`` expiring one hour from now.

        Raises:
            OverflowError: If the clock cannot represent the expiry. This
                is an environment fault, not a per-request error.
        """
        expires_at = self._clock() + TOKEN_TTL
        claims = {"sub": str(user_id), "exp": int(expires_at.timestamp())}
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Optional[str]:
        """Return the ``sub`` claim of a valid token, or None."""
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug("Token rejected: %s", type(exc).__name__)
            return None

        subject = claims["sub"]
        if not isinstance(subject, str):
            logger.debug("Token rejected: non-string subject")
            return None
        return subject
