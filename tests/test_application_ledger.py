"""
Tests for the ledger application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from pbank.application.ledger.authorize_request import AuthorizeRequestUseCase
from pbank.application.ledger.dtos import (
    GetStockQuery,
    LoginCommand,
    RecordTransactionCommand,
)
from pbank.application.ledger.get_stock import GetStockUseCase
from pbank.application.ledger.list_transactions import ListTransactionsUseCase
from pbank.application.ledger.login import LoginUseCase
from pbank.application.ledger.record_transaction import RecordTransactionUseCase
from pbank.domain.ledger.entities import (
    Principal,
    Stock,
    Transaction,
    TransactionType,
    User,
)
from pbank.domain.ledger.errors import (
    LedgerStoreError,
    MalformedRowError,
    StockNotFoundError,
    UnauthorizedError,
)
from pbank.domain.ledger.ports import (
    PasswordHasher,
    StockRepository,
    TokenAuthority,
    TransactionRepository,
    UserRepository,
)


@pytest.fixture
def token_authority() -> MagicMock:
    return MagicMock(spec=TokenAuthority)


class TestAuthorizeRequestUseCase:
    """Tests for the authorization step."""

    def test_valid_bearer_token_yields_principal(self, token_authority) -> None:
        user_id = uuid4()
        token_authority.verify.return_value = str(user_id)

        principal = AuthorizeRequestUseCase(token_authority).execute("Bearer tok")

        assert principal == Principal(user_id=user_id)
        token_authority.verify.assert_called_once_with("tok")

    @pytest.mark.parametrize(
        "header", [None, "", "tok", "Basic dXNlcjpwdw==", "bearer tok", "Bearer"]
    )
    def test_missing_or_malformed_header_is_rejected(
        self, token_authority, header
    ) -> None:
        with pytest.raises(UnauthorizedError):
            AuthorizeRequestUseCase(token_authority).execute(header)
        token_authority.verify.assert_not_called()

    def test_failed_verification_is_rejected(self, token_authority) -> None:
        token_authority.verify.return_value = None
        with pytest.raises(UnauthorizedError):
            AuthorizeRequestUseCase(token_authority).execute("Bearer tok")

    def test_subject_that_is_not_a_uuid_is_rejected(self, token_authority) -> None:
        token_authority.verify.return_value = "alice"
        with pytest.raises(UnauthorizedError):
            AuthorizeRequestUseCase(token_authority).execute("Bearer tok")

    def test_every_cause_has_the_same_public_message(self, token_authority) -> None:
        token_authority.verify.side_effect = [None, "alice"]
        use_case = AuthorizeRequestUseCase(token_authority)

        messages = []
        for header in (None, "Bearer expired", "Bearer bad-subject"):
            with pytest.raises(UnauthorizedError) as exc_info:
                use_case.execute(header)
            messages.append(exc_info.value.message)

        assert set(messages) == {"Unauthorized"}


class TestLoginUseCase:
    """Tests for the LoginUseCase."""

    @pytest.fixture
    def user(self) -> User:
        return User(id=uuid4(), username="alice", hashed_password="$2b$stored")

    def _use_case(self, user, password_matches, token_authority):
        user_repo = MagicMock(spec=UserRepository)
        user_repo.get_by_username.return_value = user
        hasher = MagicMock(spec=PasswordHasher)
        hasher.verify.return_value = password_matches
        return LoginUseCase(user_repo, hasher, token_authority), hasher

    def test_valid_credentials_issue_token_for_user(self, user, token_authority) -> None:
        token_authority.issue.return_value = "signed-token"
        use_case, hasher = self._use_case(user, True, token_authority)

        result = use_case.execute(LoginCommand(username="alice", password="pw123"))

        assert result.token == "signed-token"
        token_authority.issue.assert_called_once_with(user.id)
        hasher.verify.assert_called_once_with("pw123", "$2b$stored")

    def test_wrong_password_is_rejected(self, user, token_authority) -> None:
        use_case, _ = self._use_case(user, False, token_authority)
        with pytest.raises(UnauthorizedError):
            use_case.execute(LoginCommand(username="alice", password="wrong"))
        token_authority.issue.assert_not_called()

    def test_unknown_user_is_rejected_without_hashing(self, token_authority) -> None:
        use_case, hasher = self._use_case(None, True, token_authority)
        with pytest.raises(UnauthorizedError):
            use_case.execute(LoginCommand(username="mallory", password="pw123"))
        hasher.verify.assert_not_called()

    def test_unknown_user_and_wrong_password_look_identical(
        self, user, token_authority
    ) -> None:
        unknown, _ = self._use_case(None, False, token_authority)
        mismatch, _ = self._use_case(user, False, token_authority)

        with pytest.raises(UnauthorizedError) as unknown_exc:
            unknown.execute(LoginCommand(username="mallory", password="x"))
        with pytest.raises(UnauthorizedError) as mismatch_exc:
            mismatch.execute(LoginCommand(username="alice", password="x"))

        assert str(unknown_exc.value) == str(mismatch_exc.value)

    def test_password_is_not_in_command_repr(self) -> None:
        assert "pw123" not in repr(LoginCommand(username="alice", password="pw123"))


class TestRecordTransactionUseCase:
    """Tests for the RecordTransactionUseCase."""

    def test_owner_is_the_principal(self) -> None:
        repo = MagicMock(spec=TransactionRepository)
        principal = Principal(user_id=uuid4())
        stock_id = uuid4()

        result = RecordTransactionUseCase(repo).execute(
            principal,
            RecordTransactionCommand(
                stock_id=stock_id, quantity=10, transaction_type=TransactionType.BUY
            ),
        )

        written = repo.add.call_args.args[0]
        assert written.user_id == principal.user_id
        assert written.stock_id == stock_id
        assert written.quantity == 10
        assert written.transaction_type is TransactionType.BUY
        assert result.id == written.id
        assert result.user_id == principal.user_id
        assert result.transaction_type == "buy"
        assert result.created_at is None

    def test_each_write_gets_a_fresh_id(self) -> None:
        repo = MagicMock(spec=TransactionRepository)
        use_case = RecordTransactionUseCase(repo)
        principal = Principal(user_id=uuid4())
        command = RecordTransactionCommand(
            stock_id=uuid4(), quantity=1, transaction_type=TransactionType.BUY
        )

        first = use_case.execute(principal, command)
        second = use_case.execute(principal, command)

        assert first.id != second.id

    @pytest.mark.parametrize("quantity", [1_000_000, 0, -5])
    def test_sell_is_recorded_without_holdings_check(self, quantity) -> None:
        repo = MagicMock(spec=TransactionRepository)

        result = RecordTransactionUseCase(repo).execute(
            Principal(user_id=uuid4()),
            RecordTransactionCommand(
                stock_id=uuid4(),
                quantity=quantity,
                transaction_type=TransactionType.SELL,
            ),
        )

        repo.add.assert_called_once()
        repo.list_for_user.assert_not_called()
        assert result.quantity == quantity
        assert result.transaction_type == "sell"

    def test_store_failure_propagates(self) -> None:
        repo = MagicMock(spec=TransactionRepository)
        repo.add.side_effect = LedgerStoreError("foreign key violation")

        with pytest.raises(LedgerStoreError):
            RecordTransactionUseCase(repo).execute(
                Principal(user_id=uuid4()),
                RecordTransactionCommand(
                    stock_id=uuid4(), quantity=1, transaction_type=TransactionType.BUY
                ),
            )


class TestListTransactionsUseCase:
    """Tests for the ListTransactionsUseCase."""

    def test_queries_only_the_principal(self) -> None:
        repo = MagicMock(spec=TransactionRepository)
        principal = Principal(user_id=uuid4())
        tx = Transaction(
            id=uuid4(),
            user_id=principal.user_id,
            stock_id=uuid4(),
            quantity=3,
            transaction_type=TransactionType.SELL,
        )
        repo.list_for_user.return_value = [tx]

        results = ListTransactionsUseCase(repo).execute(principal)

        repo.list_for_user.assert_called_once_with(principal.user_id)
        assert [r.id for r in results] == [tx.id]
        assert results[0].transaction_type == "sell"

    def test_no_transactions_is_an_empty_list(self) -> None:
        repo = MagicMock(spec=TransactionRepository)
        repo.list_for_user.return_value = []
        assert ListTransactionsUseCase(repo).execute(Principal(user_id=uuid4())) == []


class TestGetStockUseCase:
    """Tests for the GetStockUseCase."""

    def test_known_symbol_returns_stock(self) -> None:
        repo = MagicMock(spec=StockRepository)
        stock = Stock(id=uuid4(), symbol="AAPL", price=187.44)
        repo.get_by_symbol.return_value = stock

        result = GetStockUseCase(repo).execute(GetStockQuery(symbol="AAPL"))

        assert (result.id, result.symbol, result.price) == (stock.id, "AAPL", 187.44)

    def test_unknown_symbol_raises_not_found(self) -> None:
        repo = MagicMock(spec=StockRepository)
        repo.get_by_symbol.return_value = None
        with pytest.raises(StockNotFoundError) as exc_info:
            GetStockUseCase(repo).execute(GetStockQuery(symbol="NOPE"))
        assert exc_info.value.symbol == "NOPE"

    def test_lookup_failure_is_reported_as_not_found(self) -> None:
        repo = MagicMock(spec=StockRepository)
        repo.get_by_symbol.side_effect = LedgerStoreError("connection reset")
        with pytest.raises(StockNotFoundError):
            GetStockUseCase(repo).execute(GetStockQuery(symbol="AAPL"))

    def test_corrupt_row_is_not_reported_as_not_found(self) -> None:
        repo = MagicMock(spec=StockRepository)
        repo.get_by_symbol.side_effect = MalformedRowError("malformed stocks row for BAD")
        with pytest.raises(MalformedRowError):
            GetStockUseCase(repo).execute(GetStockQuery(symbol="BAD"))
