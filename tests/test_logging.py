"""Tests for log output redaction."""

import logging

from pbank.shared.logging import REDACTED, CredentialRedactingFilter
from tests.conftest import fast_hasher


def _record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("pbank.test", logging.INFO, __file__, 1, msg, args, None)


class TestCredentialRedactingFilter:
    def test_bearer_token_is_masked(self) -> None:
        record = _record("Authorization was %s", "Bearer eyJhbGciOi.eyJzdWIi.c2ln")

        assert CredentialRedactingFilter().filter(record)

        assert record.getMessage() == f"Authorization was Bearer {REDACTED}"

    def test_bcrypt_hash_is_masked(self) -> None:
        stored = fast_hasher.hash("pw123")
        record = _record("loaded user with hash %s", stored)

        CredentialRedactingFilter().filter(record)

        assert stored not in record.getMessage()
        assert REDACTED in record.getMessage()

    def test_ordinary_message_is_untouched(self) -> None:
        record = _record("Stock not found: %s", "NOPE")

        CredentialRedactingFilter().filter(record)

        assert record.msg == "Stock not found: %s"
        assert record.args == ("NOPE",)
