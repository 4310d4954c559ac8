# tests/test_console_connector.py

from __future__ import annotations

import pytest

from task_tracker.cli import commands
from task_tracker.connectors.console_connector import run_console_loop

from .fakes import ScriptedInput


def _run(state, lines: list[str]) -> list[str]:
    out: list[str] = []
    run_console_loop(state, input_fn=ScriptedInput(lines), output=out.append)
    return out


def test_console_runs_commands_until_eof(state) -> None:
    out = _run(state, ["/add Buy milk", "", "/list"])

    assert len(out) == 3  # banner + two replies
    assert out[1].endswith("Created task #1.")
    assert "#1 [ ] Buy milk (regular)" in out[2]
    assert state.task_store.count_tasks() == 1


def test_console_exit_stops_reading(state) -> None:
    scripted = ScriptedInput(["/quit", "/add never"])
    run_console_loop(state, input_fn=scripted, output=lambda _: None)

    assert state.task_store.count_tasks() == 0
    assert len(scripted.prompts) == 1


def test_console_hints_on_plain_text(state) -> None:
    out = _run(state, ["buy milk"])
    assert "Commands start with '/'" in out[1]


def test_console_survives_handler_crash(state, monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "boom", boom)

    out = _run(state, ["/boom", "/add after"])

    assert out[1].endswith("Internal error while handling a command.")
    assert out[2].endswith("Created task #1.")
    assert "Command handler crashed." in caplog.text


def test_console_keyboard_interrupt_exits(state) -> None:
    def interrupted(prompt: str) -> str:
        raise KeyboardInterrupt

    out: list[str] = []
    run_console_loop(state, input_fn=interrupted, output=out.append)
    assert out[-1] == ""
