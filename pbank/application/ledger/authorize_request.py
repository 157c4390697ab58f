"""
Use case: Resolve the authenticated principal of a request.

Input: raw value of the Authorization header (may be None)
Output: Principal
Side effects: None. Token verification is pure computation.
Failure cases: UnauthorizedError (uniform for every cause).
"""

from typing import Optional
from uuid import UUID

from pbank.domain.ledger.entities import Principal
from pbank.domain.ledger.errors import UnauthorizedError
from pbank.domain.ledger.ports import TokenAuthority


BEARER_PREFIX = "Bearer "


class AuthorizeRequestUseCase:
    """Turns an Authorization header into a verified Principal.

    Only the literal ``Bearer `` scheme is accepted. The subject of
    the verified token must be a canonical UUID.
    """

    def __init__(self, token_authority: TokenAuthority) -> None:
        self._token_authority = token_authority

    def execute(self, authorization: Optional[str]) -> Principal:
        """Run the authorization step.

        Args:
            authorization: The Authorization header value, or None if absent.

        Returns:
            The principal the request acts as.

        Raises:
            UnauthorizedError: If the header is missing or malformed, the
                token does not verify, or its subject is not a user id.
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise UnauthorizedError("Missing or malformed Authorization header")

        subject = self._token_authority.verify(authorization[len(BEARER_PREFIX):])
        if subject is None:
            raise UnauthorizedError("Invalid token")

        try:
            user_id = UUID(subject)
        except ValueError:
            raise UnauthorizedError("Invalid user ID in token") from None

        return Principal(user_id=user_id)
