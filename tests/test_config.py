# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKS_APP_NAME",
        "TASKS_LOG_LEVEL",
        "TASKS_LOG_TO_FILE",
        "TASKS_DATA_DIR",
        "TASKS_DATE_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "task-tracker"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.data_dir == Path(".local/task-tracker")
    assert s.date_format == "%Y-%m-%d"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKS_APP_NAME", "todo")
    monkeypatch.setenv("TASKS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKS_LOG_TO_FILE", "off")
    monkeypatch.setenv("TASKS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKS_DATE_FORMAT", "%d/%m")

    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.data_dir == tmp_path
    assert s.date_format == "%d/%m"


def test_settings_are_frozen() -> None:
    s = get_settings()
    with pytest.raises(AttributeError):
        s.app_name = "changed"  # type: ignore[misc]
