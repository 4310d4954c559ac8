# src/task_tracker/tasks/recurrence.py

from __future__ import annotations

"""
Date helpers for the task store.

- calculate_next_date: fixed day offsets per frequency (daily/weekly/monthly)
- parse_due_date: ISO-8601 due-date strings, None when missing or unparseable
"""

import logging
from datetime import date, datetime, timedelta

from .task_models import Frequency

logger = logging.getLogger(__name__)

OCCURRENCE_DATE_FORMAT = "%a %b %d %Y"


def frequency_days(frequency: str | None) -> int:
    """Day offset for a frequency string; unknown values give 0."""
    freq = Frequency.from_raw(frequency)
    if freq is None:
        logger.warning("Unknown frequency %r; next occurrence will not advance.", frequency)
        return 0
    return freq.days


def calculate_next_date(frequency: str | None, now: datetime) -> datetime:
    return now + timedelta(days=frequency_days(frequency))


def parse_due_date(raw: str | None) -> date | None:
    """
    Parse a due date.

    Accepted:
    - "YYYY-MM-DD"
    - any ISO-8601 date-time datetime.fromisoformat() understands (time part dropped)

    Missing or unparseable input returns None.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        logger.warning("Unparseable due date %r; storing no due date.", raw)
        return None


def format_occurrence(value: datetime) -> str:
    return value.strftime(OCCURRENCE_DATE_FORMAT)
