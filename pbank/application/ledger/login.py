"""
Use case: Log a user in.

Input: LoginCommand (username, password)
Output: LoginResult (bearer token)
Side effects: None.
Failure cases: UnauthorizedError for an unknown user or a wrong password
(indistinguishable to the caller), LedgerStoreError.
"""

import logging

from pbank.application.ledger.dtos import LoginCommand, LoginResult
from pbank.domain.ledger.errors import UnauthorizedError
from pbank.domain.ledger.ports import PasswordHasher, TokenAuthority, UserRepository

logger = logging.getLogger(__name__)


class LoginUseCase:
    """Checks a username/password pair and mints a bearer token."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_authority: TokenAuthority,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._token_authority = token_authority

    def execute(self, command: LoginCommand) -> LoginResult:
        """Run the login use case.

        Args:
            command: Username and plaintext password candidate.

        Returns:
            A token whose subject is the user's id.

        Raises:
            UnauthorizedError: If the user does not exist or the password
                does not match.
        """
        user = self._user_repo.get_by_username(command.username)
        if user is None:
            raise UnauthorizedError("Unknown username")

        if not self._password_hasher.verify(command.password, user.hashed_password):
            raise UnauthorizedError("Password mismatch")

        logger.info("User %s logged in", user.id)
        return LoginResult(token=self._token_authority.issue(user.id))
