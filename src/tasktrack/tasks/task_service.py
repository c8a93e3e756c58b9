# src/tasktrack/tasks/task_service.py

from __future__ import annotations

import logging

from ..auth.user_models import User
from ..core.ports import TaskRepo
from ..errors import NotFoundError
from .task_models import Task, TaskFilter, TaskStatus

logger = logging.getLogger(__name__)


def _not_found(task_id: int) -> NotFoundError:
    # Same error for "missing" and "owned by someone else".
    return NotFoundError(f'Task with ID "{task_id}" not found')


class TaskService:
    """Owner-scoped task operations. Every call takes the authenticated User."""

    def __init__(self, tasks: TaskRepo) -> None:
        self._tasks = tasks

    def get_tasks(self, task_filter: TaskFilter | None, owner: User) -> list[Task]:
        return self._tasks.list_tasks(task_filter or TaskFilter(), user_id=owner.id)

    def get_task_by_id(self, task_id: int, owner: User) -> Task:
        task = self._tasks.find_task(task_id, user_id=owner.id)
        if task is None:
            raise _not_found(task_id)
        return task

    def create_task(self, title: str, description: str, owner: User) -> Task:
        task = self._tasks.add_task(
            title=title,
            description=description,
            user_id=owner.id,
            status=TaskStatus.OPEN,
        )
        logger.info("Task created id=%s user=%s", task.id, owner.username)
        return task

    def update_task_status(self, task_id: int, status: TaskStatus, owner: User) -> Task:
        task = self.get_task_by_id(task_id, owner)
        previous = task.status
        task.status = status
        self._tasks.save_task(task)
        logger.info(
            "Task status updated id=%s user=%s %s -> %s",
            task.id,
            owner.username,
            previous.value,
            status.value,
        )
        return task

    def delete_task(self, task_id: int, owner: User) -> None:
        affected = self._tasks.delete_task(task_id, user_id=owner.id)
        if affected == 0:
            raise _not_found(task_id)
        logger.info("Task deleted id=%s user=%s", task_id, owner.username)
