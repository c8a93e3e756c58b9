# src/tasktrack/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..auth.credentials import validate_credentials_input
from ..auth.user_models import User
from ..core.state import AppState
from ..errors import TaskTrackError, ValidationError
from ..tasks.task_models import Task, TaskFilter, TaskStatus

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        TaskTrackError messages are returned as the reply; other exceptions propagate.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TaskTrackError as e:
            logger.debug("Command /%s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _require_user(state: AppState) -> User:
    if state.current_user is None:
        raise ValidationError("Not signed in. Use /signin <username> <password>.")
    return state.current_user


def _parse_task_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f'"{raw}" is not a valid task id') from None


def format_task(task: Task) -> str:
    line = f"#{task.id} [{task.status.value}] {task.title}"
    if task.description:
        line += f" - {task.description}"
    return line


def parse_task_filter(args: list[str]) -> TaskFilter:
    """
    /tasks [status] [search words...]

    The first word is taken as a status only if it parses as one.
    """
    if not args:
        return TaskFilter()
    status: TaskStatus | None
    try:
        status = TaskStatus.parse(args[0])
        rest = args[1:]
    except ValidationError:
        status = None
        rest = args
    search = " ".join(rest).strip() or None
    return TaskFilter(status=status, search=search)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_signup(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if len(args) != 2:
        return "Usage: /signup <username> <password>"
    username, password = args
    validate_credentials_input(username, password)
    if emit:
        emit("Creating account...")
    state.identity.sign_up(username, password)
    return f"Account created for {username}. Use /signin to start a session."


def cmd_signin(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /signin <username> <password>"
    state.current_user = state.identity.sign_in(args[0], args[1])
    return f"Signed in as {state.current_user.username}."


def cmd_signout(state: AppState, args: list[str]) -> str:
    if state.current_user is None:
        return "Not signed in."
    name = state.current_user.username
    state.current_user = None
    return f"Signed out {name}."


def cmd_whoami(state: AppState, args: list[str]) -> str:
    if state.current_user is None:
        return "Not signed in."
    return f"Signed in as {state.current_user.username}."


def cmd_tasks(state: AppState, args: list[str]) -> str:
    """
    /tasks                      -> all my tasks
    /tasks done                 -> my DONE tasks
    /tasks in_progress clean    -> my IN_PROGRESS tasks mentioning "clean"
    /tasks milk                 -> my tasks mentioning "milk"
    """
    owner = _require_user(state)
    items = state.tasks.get_tasks(parse_task_filter(args), owner)
    if not items:
        return "No tasks."
    return "\n".join(format_task(t) for t in items)


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add <title> | <description>"""
    owner = _require_user(state)
    title, _, description = " ".join(args).partition("|")
    if not title.strip():
        return "Usage: /add <title> | <description>"
    task = state.tasks.create_task(title.strip(), description.strip(), owner)
    return f"Created {format_task(task)}"


def cmd_show(state: AppState, args: list[str]) -> str:
    owner = _require_user(state)
    if len(args) != 1:
        return "Usage: /show <id>"
    return format_task(state.tasks.get_task_by_id(_parse_task_id(args[0]), owner))


def cmd_status(state: AppState, args: list[str]) -> str:
    owner = _require_user(state)
    if len(args) != 2:
        return "Usage: /status <id> <OPEN|IN_PROGRESS|DONE>"
    task = state.tasks.update_task_status(
        _parse_task_id(args[0]), TaskStatus.parse(args[1]), owner
    )
    return f"Updated {format_task(task)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    owner = _require_user(state)
    if len(args) != 1:
        return "Usage: /delete <id>"
    task_id = _parse_task_id(args[0])
    state.tasks.delete_task(task_id, owner)
    return f"Deleted task #{task_id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("signup", cmd_signup, help_text="Create an account: /signup <username> <password>.")
registry.register(
    "signin", cmd_signin, help_text="Start a session: /signin <username> <password>.", aliases=["login"]
)
registry.register("signout", cmd_signout, help_text="End the session.", aliases=["logout"])
registry.register("whoami", cmd_whoami, help_text="Show the signed-in user.")
registry.register(
    "tasks", cmd_tasks, help_text="List tasks: /tasks [status] [search...].", aliases=["ls"]
)
registry.register("add", cmd_add, help_text="Create a task: /add <title> | <description>.")
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register("status", cmd_status, help_text="Change status: /status <id> <status>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
