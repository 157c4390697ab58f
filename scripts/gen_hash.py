#!/usr/bin/env python3
"""
CLI tool: Print a bcrypt hash for a password.

Used to seed ``users.hashed_password`` by hand; there is no
registration endpoint.

Usage:
    python scripts/gen_hash.py <password> [--rounds=12]
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pbank.infrastructure.ledger.password_hasher import BcryptPasswordHasher


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, hash the password and print it."""
    parser = argparse.ArgumentParser(description="Hash a password with bcrypt.")
    parser.add_argument("password", help="Plaintext password to hash")
    parser.add_argument(
        "--rounds", type=int, default=12, help="bcrypt cost factor (default: 12)"
    )
    args = parser.parse_args(argv)

    print(BcryptPasswordHasher(rounds=args.rounds).hash(args.password))
    return 0


if __name__ == "__main__":
    sys.exit(main())
