# src/tasktrack/auth/credentials.py

from __future__ import annotations

import re

from ..errors import ValidationError

USERNAME_MIN_LEN = 4
USERNAME_MAX_LEN = 20
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 20

# at least one upper, one lower, and one digit or symbol
_STRONG_PASSWORD = re.compile(r"^(?=.*[A-Z])(?=.*[a-z])(?=.*[\d\W]).*$")


def validate_credentials_input(username: str, password: str) -> None:
    """
    Policy check for user-supplied credentials (sign-up surface only).

    Raises ValidationError with a short message on the first rule violated.
    """
    if not USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN:
        raise ValidationError(
            f"username must be {USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} characters long"
        )
    if not PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN:
        raise ValidationError(
            f"password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters long"
        )
    if not _STRONG_PASSWORD.match(password):
        raise ValidationError("password too weak")
