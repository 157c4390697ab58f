"""Tests for the bcrypt password hasher and the hash-seeding script."""

import importlib.util
from pathlib import Path

from pbank.infrastructure.ledger.password_hasher import BcryptPasswordHasher

hasher = BcryptPasswordHasher(rounds=4)

GEN_HASH_PATH = Path(__file__).resolve().parent.parent / "scripts" / "gen_hash.py"


def _load_gen_hash():
    spec = importlib.util.spec_from_file_location("gen_hash", GEN_HASH_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestBcryptPasswordHasher:
    def test_matching_password_verifies(self) -> None:
        stored = hasher.hash("pw123")
        assert hasher.verify("pw123", stored)

    def test_wrong_password_does_not_verify(self) -> None:
        stored = hasher.hash("pw123")
        assert not hasher.verify("wrong", stored)

    def test_hashes_are_salted(self) -> None:
        assert hasher.hash("pw123") != hasher.hash("pw123")

    def test_hash_never_contains_plaintext(self) -> None:
        assert "pw123" not in hasher.hash("pw123")

    def test_unusable_stored_hash_is_a_mismatch(self) -> None:
        assert not hasher.verify("pw123", "not-a-bcrypt-hash")

    def test_verification_uses_cost_from_stored_hash(self) -> None:
        stored = hasher.hash("pw123")
        assert BcryptPasswordHasher(rounds=12).verify("pw123", stored)


class TestGenHashScript:
    def test_prints_a_verifiable_hash(self, capsys) -> None:
        gen_hash = _load_gen_hash()

        assert gen_hash.main(["fake", "--rounds", "4"]) == 0

        printed = capsys.readouterr().out.strip()
        assert printed.startswith("$2")
        assert hasher.verify("fake", printed)
