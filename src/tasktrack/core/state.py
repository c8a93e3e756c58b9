# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..auth.identity_service import IdentityService
from ..auth.user_models import User
from ..tasks.task_service import TaskService


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: Any

    identity: IdentityService
    tasks: TaskService

    # Console session: the signed-in user, if any.
    current_user: User | None = None
