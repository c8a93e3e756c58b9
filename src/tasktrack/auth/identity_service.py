# src/tasktrack/auth/identity_service.py

from __future__ import annotations

import hmac
import logging

from ..core.ports import PasswordHasher, UserRepo
from ..errors import ConflictError, InternalError, UniqueViolation, UnauthorizedError
from .user_models import User

logger = logging.getLogger(__name__)


class IdentityService:
    """
    Sign-up and credential validation.

    Unknown usernames and wrong passwords are indistinguishable to callers:
    validate_credentials() returns None for both and never raises.
    """

    def __init__(self, users: UserRepo, hasher: PasswordHasher) -> None:
        self._users = users
        self._hasher = hasher

    def sign_up(self, username: str, password: str) -> None:
        salt = self._hasher.gen_salt()
        hashed = self.hash_password(password, salt)

        try:
            user_id = self._users.add_user(username=username, password=hashed, salt=salt)
        except UniqueViolation as e:
            logger.info("Sign-up rejected, username taken: %s", username)
            raise ConflictError("Username already exists") from e
        except Exception as e:
            logger.exception("Sign-up failed for username=%s", username)
            raise InternalError("Failed to create user") from e

        logger.info("User signed up id=%s username=%s", user_id, username)

    def validate_credentials(self, username: str, password: str) -> str | None:
        """Return the username if the password matches, else None."""
        user = self._users.find_by_username(username)
        if user is not None and self.validate_password(user, password):
            return user.username
        return None

    def validate_password(self, user: User, password: str) -> bool:
        hashed = self.hash_password(password, user.salt)
        return hmac.compare_digest(hashed.encode("utf-8"), user.password.encode("utf-8"))

    def hash_password(self, password: str, salt: str) -> str:
        return self._hasher.hash(password, salt)

    def get_user(self, username: str) -> User | None:
        return self._users.find_by_username(username)

    def sign_in(self, username: str, password: str) -> User:
        """
        Resolve credentials into the User that owns the session.

        The error message is the same whatever the cause of failure.
        """
        valid = self.validate_credentials(username, password)
        user = self.get_user(valid) if valid else None
        if user is None:
            logger.info("Sign-in failed username=%s", username)
            raise UnauthorizedError("Invalid credentials")
        logger.info("User signed in id=%s username=%s", user.id, user.username)
        return user
