# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import TaskPredicate
from ..core.state import AppState
from ..tasks.recurrence import parse_due_date
from ..tasks.task_api import is_completed, is_pending, is_recurring, is_regular
from ..tasks.task_models import Frequency, RecurringTask, Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%Y-%m-%d"

LIST_FILTERS: dict[str, TaskPredicate | None] = {
    "all": None,
    "regular": is_regular,
    "recurring": is_recurring,
    "pending": is_pending,
    "done": is_completed,
}


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
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

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_fields(args: list[str]) -> list[str]:
    """'a b | c | d' -> ['a b', 'c', 'd']."""
    return [p.strip() for p in " ".join(args).split("|")]


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def _date_format(state: AppState) -> str:
    return str(getattr(state.settings, "date_format", DEFAULT_DATE_FORMAT) or DEFAULT_DATE_FORMAT)


def format_task(task: Task, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    mark = "x" if task.completed else " "
    if isinstance(task, RecurringTask):
        detail = f"recurring {task.frequency}, next {task.next_occurrence.strftime(date_format)}"
    elif task.due_date is not None:
        detail = f"regular, due {task.due_date.strftime(date_format)}"
    else:
        detail = "regular"

    line = f"#{task.id} [{mark}] {task.title} ({detail})"
    if task.description:
        line += f" - {task.description}"
    return line


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title> [| description] [| YYYY-MM-DD]
    """
    fields = _split_fields(args)
    title = fields[0]
    if not title:
        return "Usage: /add <title> [| description] [| YYYY-MM-DD]"

    description = fields[1] if len(fields) > 1 else ""
    due_raw = fields[2] if len(fields) > 2 else None

    task_id = state.task_store.create_regular_task(title, description, due_raw)

    reply = f"Created task #{task_id}."
    if due_raw and parse_due_date(due_raw) is None:
        reply += f" Due date {due_raw!r} not understood (use YYYY-MM-DD); saved without one."
    return reply


def cmd_recur(state: AppState, args: list[str]) -> str:
    """
    /recur <daily|weekly|monthly> <title> [| description]
    """
    usage = "Usage: /recur <daily|weekly|monthly> <title> [| description]"
    if len(args) < 2:
        return usage

    frequency = args[0].lower()
    if Frequency.from_raw(frequency) is None:
        choices = ", ".join(f.value for f in Frequency)
        return f"Unknown frequency {args[0]!r}. Choose one of: {choices}."

    fields = _split_fields(args[1:])
    title = fields[0]
    if not title:
        return usage
    description = fields[1] if len(fields) > 1 else ""

    task_id = state.task_store.create_recurring_task(title, description, frequency)
    task = state.task_store.get_task_by_id(task_id)
    if isinstance(task, RecurringTask):
        return (
            f"Created recurring task #{task_id}, "
            f"next occurrence {task.next_occurrence.strftime(_date_format(state))}."
        )
    return f"Created recurring task #{task_id}."


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    result = state.task_store.complete_task(task_id)
    logger.debug("/done id=%s success=%s", task_id, result.success)
    if not result.success:
        return f"{result.message}: #{task_id}"
    return result.message


def cmd_show(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /show <id>"
    task = state.task_store.get_task_by_id(task_id)
    if task is None:
        return f"Task not found: #{task_id}"
    return format_task(task, _date_format(state))


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> all tasks
    /list regular    -> regular tasks only
    /list recurring  -> recurring tasks only
    /list pending    -> not completed
    /list done       -> completed
    """
    which = args[0].lower() if args else "all"
    if which not in LIST_FILTERS:
        return f"Unknown filter {which!r}. Use one of: {', '.join(LIST_FILTERS)}."

    predicate = LIST_FILTERS[which]
    store = state.task_store
    tasks = store.get_all_tasks() if predicate is None else store.get_tasks_by_type(predicate)
    if not tasks:
        return "No tasks." if which == "all" else f"No {which} tasks."

    fmt = _date_format(state)
    return "\n".join(format_task(t, fmt) for t in tasks)


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    total = store.count_tasks()
    done = len(store.get_tasks_by_type(is_completed))
    recurring = len(store.get_tasks_by_type(is_recurring))
    return (
        "Status:\n"
        f"  Tasks: {total} ({recurring} recurring)\n"
        f"  Completed: {done}\n"
        f"  Pending: {total - done}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <title> [| description] [| YYYY-MM-DD].")
registry.register(
    "recur",
    cmd_recur,
    help_text="Add a recurring task: /recur <daily|weekly|monthly> <title> [| description].",
)
registry.register("done", cmd_done, help_text="Mark a task complete: /done <id>.", aliases=["complete"])
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register(
    "list",
    cmd_list,
    help_text="List tasks: /list [all|regular|recurring|pending|done].",
    aliases=["ls"],
)
registry.register("status", cmd_status, help_text="Show task counts.")
