# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path
from typing import Any

from .task_models import Task, TaskFilter, TaskStatus

logger = logging.getLogger(__name__)


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


def _like_pattern(term: str) -> str:
    """Literal, casefolded substring pattern for casefold(col) LIKE ... ESCAPE '\\'."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped.casefold()}%"


class TaskStore:
    """
    SQLite task store.

    Every read and write past add_task() is scoped by (id, user_id), so a
    caller can never see or touch another owner's rows.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasktrack.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

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
        # SQLite LOWER/LIKE only fold ASCII; search needs Unicode case folding.
        conn.create_function("casefold", 1, _casefold, deterministic=True)

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    status TEXT NOT NULL DEFAULT 'OPEN',
                    user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_owner_status ON tasks(user_id, status)")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"]),
            description=str(row["description"] or ""),
            status=TaskStatus.from_db(row["status"]),
            user_id=int(row["user_id"]),
            created_at=float(row["created_at"] or 0.0),
            updated_at=float(row["updated_at"] or 0.0),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def add_task(
        self,
        *,
        title: str,
        description: str,
        user_id: int,
        status: TaskStatus = TaskStatus.OPEN,
    ) -> Task:
        if not title or not title.strip():
            raise ValueError("title is required")

        now = time.time()
        conn = self._get_conn()
        try:
            cur = conn.execute(
                """
                INSERT INTO tasks(title, description, status, user_id, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (title.strip(), (description or "").strip(), status.value, int(user_id), now, now),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise RuntimeError("SQLite did not return lastrowid for tasks insert")
            task = Task(
                id=int(rowid),
                title=title.strip(),
                description=(description or "").strip(),
                status=status,
                user_id=int(user_id),
                created_at=now,
                updated_at=now,
            )
            logger.debug("Task added id=%s user_id=%s status=%s", task.id, user_id, status.value)
            return task
        finally:
            conn.close()

    def list_tasks(self, task_filter: TaskFilter, *, user_id: int) -> list[Task]:
        """
        Owner's tasks, narrowed by status and/or a case-insensitive substring
        of title or description.
        """
        clauses = ["user_id = ?"]
        params: list[Any] = [int(user_id)]

        if task_filter.status is not None:
            clauses.append("status = ?")
            params.append(task_filter.status.value)

        if task_filter.search:
            pattern = _like_pattern(task_filter.search)
            clauses.append(
                "(casefold(title) LIKE ? ESCAPE '\\' OR casefold(description) LIKE ? ESCAPE '\\')"
            )
            params.extend([pattern, pattern])

        sql = f"SELECT * FROM tasks WHERE {' AND '.join(clauses)} ORDER BY id ASC"

        conn = self._get_conn()
        try:
            return [self._row_to_task(r) for r in conn.execute(sql, params).fetchall()]
        finally:
            conn.close()

    def find_task(self, task_id: int, *, user_id: int) -> Task | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM tasks WHERE id = ? AND user_id = ?",
                (int(task_id), int(user_id)),
            ).fetchone()
            return self._row_to_task(row) if row else None
        finally:
            conn.close()

    def save_task(self, task: Task) -> None:
        """Persist title/description/status of a task loaded via find_task()."""
        task.updated_at = time.time()
        conn = self._get_conn()
        try:
            conn.execute(
                """
                UPDATE tasks
                SET title = ?, description = ?, status = ?, updated_at = ?
                WHERE id = ? AND user_id = ?
                """,
                (
                    task.title,
                    task.description,
                    task.status.value,
                    task.updated_at,
                    int(task.id),
                    int(task.user_id),
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def delete_task(self, task_id: int, *, user_id: int) -> int:
        conn = self._get_conn()
        try:
            cur = conn.execute(
                "DELETE FROM tasks WHERE id = ? AND user_id = ?",
                (int(task_id), int(user_id)),
            )
            conn.commit()
            return cur.rowcount
        finally:
            conn.close()
