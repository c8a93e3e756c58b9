# src/tasktrack/auth/hashing.py

from __future__ import annotations

import bcrypt

# bcrypt only consumes the first 72 bytes of a password; newer releases
# raise instead of truncating.
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptHasher:
    """
    PasswordHasher backed by bcrypt.

    The salt is a full bcrypt salt string ("$2b$<rounds>$<22 chars>"), so the
    cost factor travels with it and hash(password, salt) is deterministic.

    Passwords longer than 72 UTF-8 bytes are truncated before hashing, which
    is what bcrypt itself did historically. Any password hashes; two
    passwords sharing their first 72 bytes hash the same.
    """

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def gen_salt(self) -> str:
        return bcrypt.gensalt(rounds=self.rounds).decode("ascii")

    def hash(self, password: str, salt: str) -> str:
        secret = password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
        return bcrypt.hashpw(secret, salt.encode("ascii")).decode("ascii")
