# src/tasktrack/core/ports.py

"""
Ports (interfaces) used by the services.

Services depend on Protocols instead of concrete implementations.
This keeps storage and hashing swappable and makes testing easier.
"""

from __future__ import annotations

from typing import Any, Protocol


class PasswordHasher(Protocol):
    """One-way salted hash. hash() must be deterministic for a given salt."""

    def gen_salt(self) -> str: ...
    def hash(self, password: str, salt: str) -> str: ...


class UserRepo(Protocol):
    def add_user(self, *, username: str, password: str, salt: str) -> int: ...
    def find_by_username(self, username: str) -> Any | None: ...
    def count_users(self) -> int: ...


class TaskRepo(Protocol):
    def add_task(
            self,
            *,
            title: str,
            description: str,
            user_id: int,
            status: Any = None,  # TaskStatus (kept as Any to avoid import coupling)
    ) -> Any: ...

    def list_tasks(self, task_filter: Any, *, user_id: int) -> list[Any]: ...
    def find_task(self, task_id: int, *, user_id: int) -> Any | None: ...
    def save_task(self, task: Any) -> None: ...

    # Conditional delete on (id, user_id); returns affected row count.
    def delete_task(self, task_id: int, *, user_id: int) -> int: ...
