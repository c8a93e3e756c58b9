# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from tasktrack.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    for name in ("APP_NAME", "DATA_DIR", "DB_PATH", "BCRYPT_ROUNDS", "CONSOLE_ENABLED"):
        monkeypatch.delenv(f"TASKTRACK_{name}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "tasktrack"
    assert s.data_dir == Path(".local/tasktrack")
    assert s.db_path == Path(".local/tasktrack") / "tasktrack.sqlite3"
    assert s.bcrypt_rounds == 10
    assert s.console_enabled is True


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TASKTRACK_DB_PATH", raising=False)
    monkeypatch.setenv("TASKTRACK_BCRYPT_ROUNDS", "99")
    monkeypatch.setenv("TASKTRACK_CONSOLE_ENABLED", "off")

    s = Settings.from_env()

    assert s.db_path == tmp_path / "tasktrack.sqlite3"
    assert s.bcrypt_rounds == 31
    assert s.console_enabled is False
