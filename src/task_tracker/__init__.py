"""In-memory tracker for regular and recurring tasks."""

from .tasks.task_models import CompletionResult, Frequency, RecurringTask, RegularTask, Task, TaskType
from .tasks.task_store import TaskStore

__all__ = [
    "CompletionResult",
    "Frequency",
    "RecurringTask",
    "RegularTask",
    "Task",
    "TaskStore",
    "TaskType",
]
