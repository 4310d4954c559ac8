# src/task_tracker/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any
    task_store: TaskRepo

    # Serializes command handling when several front ends share one state.
    lock: threading.Lock = field(default_factory=threading.Lock)
