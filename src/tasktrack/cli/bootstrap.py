# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete stores and the bcrypt hasher into the services on AppState.
"""

from __future__ import annotations

import logging

from ..auth.hashing import BcryptHasher
from ..auth.identity_service import IdentityService
from ..auth.user_store import UserStore
from ..config import get_settings
from ..core.ports import PasswordHasher
from ..core.state import AppState
from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, hasher: PasswordHasher | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the hasher) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if hasher is None:
        hasher = BcryptHasher(rounds=int(getattr(settings, "bcrypt_rounds", 10)))

    # users must exist before tasks: tasks.user_id references users(id)
    users = UserStore(settings.db_path)
    task_store = TaskStore(settings.db_path)

    state = AppState(
        settings=settings,
        identity=IdentityService(users, hasher),
        tasks=TaskService(task_store),
    )
    logger.debug("AppState created db=%s", settings.db_path)
    return state
