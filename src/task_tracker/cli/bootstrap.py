# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the task store and its clock into AppState.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from ..config import get_settings
from ..core.ports import Clock
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    data_dir = getattr(settings, "data_dir", None)
    if data_dir:
        Path(data_dir).mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and clock are injectable so tests can avoid global config reads
    and pin "now". If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(clock=clock or datetime.now)
    logger.debug("State created app=%s", getattr(settings, "app_name", "task-tracker"))
    return AppState(settings=settings, task_store=store)
