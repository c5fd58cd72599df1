from __future__ import annotations

import os

import bcrypt

from rbo.application.ports.security import PasswordHasher

DEFAULT_BCRYPT_ROUNDS = 14


def bcrypt_rounds() -> int:
    return int(os.getenv("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS))


class BcryptPasswordHasher(PasswordHasher):
    """Stores passwords as standard ``$2b$`` bcrypt hashes."""

    def __init__(self, rounds: int | None = None) -> None:
        self._rounds = rounds or bcrypt_rounds()

    def hash(self, password: str) -> str:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash, or a password past bcrypt's 72-byte limit.
            return False
