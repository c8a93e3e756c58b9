# src/tasktrack/auth/user_models.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class User:
    id: int
    username: str
    # bcrypt hash of (password, salt); never the plaintext
    password: str = field(repr=False)
    salt: str = field(repr=False)
    created_at: float = 0.0
