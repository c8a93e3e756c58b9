# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktrack.auth.user_models import User
from tasktrack.cli.bootstrap import create_initial_state
from tasktrack.core.state import AppState

from .fakes import FakeHasher


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasktrack-test",
        data_dir=tmp_path,
        db_path=tmp_path / "tasktrack.sqlite3",
        bcrypt_rounds=4,
        console_enabled=False,
    )


@pytest.fixture()
def hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture()
def state(settings: SimpleNamespace, hasher: FakeHasher) -> AppState:
    """
    AppState wired with real SQLite stores and a deterministic hasher.

    NOTE: the stores are real because owner scoping lives in their SQL.
    """
    return create_initial_state(settings=settings, hasher=hasher)


def _make_user(state: AppState, username: str) -> User:
    state.identity.sign_up(username, "Passw0rd!")
    user = state.identity.get_user(username)
    assert user is not None
    return user


@pytest.fixture()
def alice(state: AppState) -> User:
    return _make_user(state, "alice")


@pytest.fixture()
def bob(state: AppState) -> User:
    return _make_user(state, "bob")
