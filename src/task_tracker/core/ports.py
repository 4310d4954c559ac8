# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front end.

The console side depends on Protocols instead of the concrete store.
The clock is a plain callable so tests can pin "now".
"""

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from ..tasks.task_models import CompletionResult, Task

Clock = Callable[[], datetime]
TaskPredicate = Callable[[Task], bool]


class TaskRepo(Protocol):
    # Creation
    def create_regular_task(
            self,
            title: str,
            description: str = "",
            due_date: str | None = None,
    ) -> int: ...

    def create_recurring_task(
            self,
            title: str,
            description: str = "",
            frequency: str = "",
    ) -> int: ...

    # Lookup / completion
    def get_task_by_id(self, task_id: int) -> Task | None: ...
    def complete_task(self, task_id: int) -> CompletionResult: ...
    def get_tasks_by_type(self, predicate: TaskPredicate) -> list[Task]: ...
    def get_all_tasks(self) -> list[Task]: ...
    def count_tasks(self) -> int: ...
