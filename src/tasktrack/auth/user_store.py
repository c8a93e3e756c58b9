# src/tasktrack/auth/user_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from ..errors import UniqueViolation
from .user_models import User

logger = logging.getLogger(__name__)


def is_unique_violation(exc: sqlite3.IntegrityError) -> bool:
    """True if SQLite rejected the write because of a UNIQUE constraint."""
    if getattr(exc, "sqlite_errorname", None) == "SQLITE_CONSTRAINT_UNIQUE":
        return True
    return "UNIQUE constraint failed" in str(exc)


class UserStore:
    """
    SQLite user store.

    Usernames are unique at the storage layer (UNIQUE column); a duplicate
    insert is reported as UniqueViolation, any other sqlite3.Error propagates.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasktrack.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("UserStore ready db=%s total=%s", self._db_path, self.count_users())

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA foreign_keys=ON")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    username TEXT NOT NULL UNIQUE,
                    password TEXT NOT NULL,
                    salt TEXT NOT NULL,
                    created_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(
            id=int(row["id"]),
            username=str(row["username"]),
            password=str(row["password"]),
            salt=str(row["salt"]),
            created_at=float(row["created_at"] or 0.0),
        )

    # ---- public API ----

    def count_users(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM users").fetchone()
            return int(n)
        finally:
            conn.close()

    def add_user(self, *, username: str, password: str, salt: str) -> int:
        """Insert a user row. `password` must already be hashed."""
        conn = self._get_conn()
        try:
            try:
                cur = conn.execute(
                    "INSERT INTO users(username, password, salt, created_at) VALUES (?, ?, ?, ?)",
                    (username, password, salt, time.time()),
                )
                conn.commit()
            except sqlite3.IntegrityError as e:
                if is_unique_violation(e):
                    raise UniqueViolation("username") from e
                raise
            rowid = cur.lastrowid
            if rowid is None:
                raise RuntimeError("SQLite did not return lastrowid for users insert")
            user_id = int(rowid)
            logger.debug("User added id=%s username=%s", user_id, username)
            return user_id
        finally:
            conn.close()

    def find_by_username(self, username: str) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE username = ?", (username,)).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()
