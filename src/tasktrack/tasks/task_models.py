# src/tasktrack/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..errors import ValidationError

logger = logging.getLogger(__name__)


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Any status may move to any other; new tasks always start OPEN.
    """

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.OPEN
        try:
            return cls(raw)
        except ValueError:
            logger.warning("Unknown persisted task status %r; reading it as OPEN", raw)
            return cls.OPEN

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        """Parse user input ("done", "in-progress", "IN_PROGRESS", ...)."""
        key = raw.strip().upper().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise ValidationError(f'"{raw}" is an invalid status') from None


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    status: TaskStatus
    user_id: int
    created_at: float
    updated_at: float


@dataclass(frozen=True, slots=True)
class TaskFilter:
    """Optional listing predicates; both None means "all of the owner's tasks"."""

    status: TaskStatus | None = None
    search: str | None = None
