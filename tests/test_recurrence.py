# tests/test_recurrence.py

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from task_tracker.tasks.recurrence import (
    calculate_next_date,
    format_occurrence,
    frequency_days,
    parse_due_date,
)
from task_tracker.tasks.task_models import Frequency

NOW = datetime(2025, 1, 31, 23, 30)


@pytest.mark.parametrize(
    ("frequency", "days"),
    [("daily", 1), ("weekly", 7), ("monthly", 30), (Frequency.WEEKLY, 7)],
)
def test_known_frequencies(frequency, days) -> None:
    assert calculate_next_date(frequency, NOW) == NOW + timedelta(days=days)


def test_monthly_is_thirty_days_not_a_calendar_month() -> None:
    # Jan 31 + 30 days lands in March, not on Feb 28.
    assert calculate_next_date("monthly", NOW) == datetime(2025, 3, 2, 23, 30)


@pytest.mark.parametrize("frequency", ["", None, "yearly", "DAILY", " daily"])
def test_unknown_frequency_adds_nothing(frequency, caplog) -> None:
    assert frequency_days(frequency) == 0
    assert calculate_next_date(frequency, NOW) == NOW
    assert "Unknown frequency" in caplog.text


def test_parse_due_date_iso_date() -> None:
    assert parse_due_date("2025-04-01") == date(2025, 4, 1)
    assert parse_due_date("  2025-04-01  ") == date(2025, 4, 1)


def test_parse_due_date_iso_datetime_drops_time() -> None:
    assert parse_due_date("2025-04-01T18:45:00") == date(2025, 4, 1)


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_due_date_missing(raw) -> None:
    assert parse_due_date(raw) is None


@pytest.mark.parametrize("raw", ["April 1st", "2025-13-01", "01/04/2025"])
def test_parse_due_date_garbage(raw, caplog) -> None:
    assert parse_due_date(raw) is None
    assert "Unparseable due date" in caplog.text


def test_format_occurrence() -> None:
    assert format_occurrence(datetime(2025, 4, 1, 8, 0)) == "Tue Apr 01 2025"
