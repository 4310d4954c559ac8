# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from datetime import datetime

from ..core.ports import Clock, TaskPredicate
from .recurrence import calculate_next_date, format_occurrence, parse_due_date
from .task_models import CompletionResult, RecurringTask, RegularTask, Task

logger = logging.getLogger(__name__)

MSG_NOT_FOUND = "Task not found"
MSG_COMPLETED = "Task marked as complete"
MSG_RECURRING_COMPLETED = "Task marked complete. Next occurrence: {next_occurrence}"


class TaskStore:
    """
    In-memory task store.

    - ids start at 1 and strictly increase in creation order
    - tasks are never removed; the lifecycle is create -> complete (repeatable)
    - "now" comes from the injected clock, never read ambiently

    Lookups and completion report "not found" as a value (None / failed
    CompletionResult) instead of raising.

    Thread-safety:
    - id allocation, append and completion run under one lock
    """

    def __init__(self, clock: Clock = datetime.now) -> None:
        self._clock = clock
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def create_regular_task(
        self,
        title: str,
        description: str = "",
        due_date: str | None = None,
    ) -> int:
        parsed_due = parse_due_date(due_date)
        now = self._clock()

        with self._lock:
            task = RegularTask(
                id=self._allocate_id(),
                title=title,
                description=description or "",
                due_date=parsed_due,
                created_at=now,
            )
            self._tasks.append(task)

        logger.debug("Regular task added id=%s due_date=%s", task.id, task.due_date)
        return task.id

    def create_recurring_task(
        self,
        title: str,
        description: str = "",
        frequency: str = "",
    ) -> int:
        now = self._clock()
        next_occurrence = calculate_next_date(frequency, now)

        with self._lock:
            task = RecurringTask(
                id=self._allocate_id(),
                title=title,
                description=description or "",
                frequency=frequency,
                next_occurrence=next_occurrence,
                created_at=now,
            )
            self._tasks.append(task)

        logger.debug(
            "Recurring task added id=%s frequency=%s next_occurrence=%s",
            task.id,
            frequency,
            next_occurrence,
        )
        return task.id

    def get_task_by_id(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def complete_task(self, task_id: int) -> CompletionResult:
        """
        Mark a task complete.

        Recurring tasks stay in place: the same record gets a fresh
        next_occurrence computed from now (not from the previous value).
        Completing an already-completed recurring task advances it again.
        """
        with self._lock:
            task = self._find(task_id)
            if task is None:
                logger.debug("complete_task: no task id=%s", task_id)
                return CompletionResult(success=False, message=MSG_NOT_FOUND)

            task.completed = True

            if isinstance(task, RecurringTask):
                task.next_occurrence = calculate_next_date(task.frequency, self._clock())
                logger.debug(
                    "Recurring task completed id=%s next_occurrence=%s",
                    task.id,
                    task.next_occurrence,
                )
                return CompletionResult(
                    success=True,
                    message=MSG_RECURRING_COMPLETED.format(
                        next_occurrence=format_occurrence(task.next_occurrence)
                    ),
                )

        logger.debug("Task completed id=%s", task_id)
        return CompletionResult(success=True, message=MSG_COMPLETED)

    def get_tasks_by_type(self, predicate: TaskPredicate) -> list[Task]:
        """Tasks matching predicate, in creation order. The predicate may test any field."""
        return [task for task in self._tasks if predicate(task)]

    def get_all_tasks(self) -> list[Task]:
        return list(self._tasks)
