# src/tasktrack/errors.py

"""
Error taxonomy.

Service-level errors (raised to callers of IdentityService / TaskService):
- ConflictError: duplicate username on sign-up
- NotFoundError: task missing OR owned by someone else (never "forbidden")
- InternalError: unexpected persistence failure
- UnauthorizedError: sign-in failed (same message for every cause)
- ValidationError: bad input rejected at the surface

Storage-level errors (raised by the SQLite stores):
- StoreError / UniqueViolation
"""

from __future__ import annotations


class TaskTrackError(Exception):
    """Base class for errors that are safe to show to the caller."""


class ConflictError(TaskTrackError):
    pass


class NotFoundError(TaskTrackError):
    pass


class InternalError(TaskTrackError):
    pass


class UnauthorizedError(TaskTrackError):
    pass


class ValidationError(TaskTrackError, ValueError):
    pass


class StoreError(Exception):
    """Raised by stores when the backend rejects an operation."""


class UniqueViolation(StoreError):
    """A UNIQUE constraint rejected the write."""

    def __init__(self, column: str, message: str | None = None) -> None:
        super().__init__(message or f"unique constraint failed: {column}")
        self.column = column
