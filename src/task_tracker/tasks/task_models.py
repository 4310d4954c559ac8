# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import ClassVar


class TaskType(StrEnum):
    REGULAR = "regular"
    RECURRING = "recurring"


class Frequency(StrEnum):
    """
    Recurrence period of a recurring task.

    Notes:
    - "monthly" is a flat 30 days, not calendar-month arithmetic.
    - RecurringTask keeps the raw frequency string; use from_raw() to map it.
    """

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def days(self) -> int:
        return _FREQUENCY_DAYS[self]

    @classmethod
    def from_raw(cls, raw: str | None) -> Frequency | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


_FREQUENCY_DAYS: dict[Frequency, int] = {
    Frequency.DAILY: 1,
    Frequency.WEEKLY: 7,
    Frequency.MONTHLY: 30,
}


@dataclass(slots=True)
class RegularTask:
    type: ClassVar[TaskType] = TaskType.REGULAR

    id: int
    title: str
    created_at: datetime
    description: str = ""
    completed: bool = False
    due_date: date | None = None


@dataclass(slots=True)
class RecurringTask:
    type: ClassVar[TaskType] = TaskType.RECURRING

    id: int
    title: str
    created_at: datetime
    frequency: str
    next_occurrence: datetime
    description: str = ""
    completed: bool = False


Task = RegularTask | RecurringTask


@dataclass(slots=True, frozen=True)
class CompletionResult:
    success: bool
    message: str
