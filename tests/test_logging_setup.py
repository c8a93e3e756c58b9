# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

import tasktrack.core.ports as ports
from tasktrack.logging_setup import ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("tasktrack.tasks.task_store", logging.DEBUG, True),
        ("tasktrack", logging.INFO, True),
        ("tasktrackish", logging.INFO, False),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
        ("urllib3", logging.WARNING, False),
        ("urllib3", logging.ERROR, True),
    ],
)
def test_console_noise_filter(name: str, level: int, shown: bool) -> None:
    assert ConsoleNoiseFilter().filter(_record(name, level)) is shown


def test_ports_module_has_docstring() -> None:
    assert ports.__doc__ is not None
    assert "Ports (interfaces)" in ports.__doc__
