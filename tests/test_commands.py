# tests/test_commands.py

from __future__ import annotations

import pytest

from tasktrack.cli.commands import CommandRegistry, parse_task_filter, registry
from tasktrack.errors import NotFoundError
from tasktrack.tasks.task_models import TaskFilter, TaskStatus


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")


def test_command_registry_renders_domain_errors(state) -> None:
    reg = CommandRegistry()

    def boom(state, args):
        raise NotFoundError('Task with ID "7" not found')

    reg.register("boom", boom, "boom")
    assert reg.handle(state, "/boom") == 'Error: Task with ID "7" not found'


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ([], TaskFilter()),
        (["done"], TaskFilter(status=TaskStatus.DONE)),
        (["in_progress", "clean"], TaskFilter(status=TaskStatus.IN_PROGRESS, search="clean")),
        (["buy", "milk"], TaskFilter(search="buy milk")),
    ],
)
def test_parse_task_filter(args, expected) -> None:
    assert parse_task_filter(args) == expected


def test_task_commands_require_sign_in(state) -> None:
    reply = registry.handle(state, "/tasks") or ""
    assert reply.startswith("Error: Not signed in")


def test_signup_enforces_password_policy(state) -> None:
    assert registry.handle(state, "/signup alice weak") == "Error: password must be 8-20 characters long"
    assert registry.handle(state, "/signup alice alllowercase1") == "Error: password too weak"
    assert registry.handle(state, "/signup al Passw0rd!") == (
        "Error: username must be 4-20 characters long"
    )


def test_console_session_flow(state) -> None:
    assert "Account created" in (registry.handle(state, "/signup alice Passw0rd!") or "")
    assert registry.handle(state, "/signup alice Passw0rd!") == "Error: Username already exists"
    assert registry.handle(state, "/signin alice wrong") == "Error: Invalid credentials"
    assert registry.handle(state, "/signin alice Passw0rd!") == "Signed in as alice."

    created = registry.handle(state, "/add Buy milk | get milk") or ""
    assert created.startswith("Created #")
    task_id = created.split("#", 1)[1].split(" ", 1)[0]

    assert registry.handle(state, f"/status {task_id} in-progress") == (
        f"Updated #{task_id} [IN_PROGRESS] Buy milk - get milk"
    )
    assert registry.handle(state, "/tasks in_progress milk") == (
        f"#{task_id} [IN_PROGRESS] Buy milk - get milk"
    )
    assert registry.handle(state, f"/status {task_id} later") == 'Error: "later" is an invalid status'

    registry.handle(state, "/signout")
    registry.handle(state, "/signup bobby Passw0rd!")
    registry.handle(state, "/signin bobby Passw0rd!")
    assert registry.handle(state, f"/delete {task_id}") == (
        f'Error: Task with ID "{task_id}" not found'
    )
    assert registry.handle(state, "/tasks") == "No tasks."
