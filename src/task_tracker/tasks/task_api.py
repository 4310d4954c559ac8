# src/task_tracker/tasks/task_api.py

from __future__ import annotations

from ..core.ports import TaskPredicate
from .task_models import Task, TaskType


def is_recurring(task: Task) -> bool:
    return task.type == TaskType.RECURRING


def is_regular(task: Task) -> bool:
    return task.type == TaskType.REGULAR


def is_completed(task: Task) -> bool:
    return task.completed


def is_pending(task: Task) -> bool:
    return not task.completed


def has_type(task_type: TaskType | str) -> TaskPredicate:
    """
    Build a predicate for get_tasks_by_type() from a type tag.
    Accepts the enum or its raw value ("regular" / "recurring").
    """
    wanted = str(task_type)

    def _predicate(task: Task) -> bool:
        return task.type == wanted

    return _predicate
