"""Date-range bucketing for task queries.

Tasks are classified by the calendar date (UTC) of their due date; the time
of day never matters. Windows are computed from the current time on every
call, nothing is cached.
"""

import enum
from datetime import date, datetime, time, timedelta
from typing import NamedTuple

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from todo_list.clock import to_utc_naive


class TaskRange(enum.Enum):
    """Named date buckets exposed by the API."""

    TODAY = "today"
    TOMORROW = "tomorrow"
    WEEK = "this-week"


class DateWindow(NamedTuple):
    """Inclusive range of calendar dates."""

    start: date
    end: date

    def as_timestamps(self) -> tuple[datetime, datetime]:
        """Half-open timestamp bounds ``[start 00:00, end + 1 day 00:00)``."""
        lower = datetime.combine(self.start, time.min)
        upper = datetime.combine(self.end + timedelta(days=1), time.min)
        return lower, upper


def current_date(now: datetime) -> date:
    """UTC calendar date of ``now``."""
    return to_utc_naive(now).date()


def week_bounds(today: date) -> DateWindow:
    """Monday to Sunday week containing ``today``."""
    # weekday() is Monday=0 .. Sunday=6
    days_from_monday = today.weekday()
    start_of_week = today - timedelta(days=days_from_monday)
    return DateWindow(start_of_week, start_of_week + timedelta(days=6))


def window_for(task_range: TaskRange, now: datetime) -> DateWindow:
    """Resolve a named range to concrete dates relative to ``now``."""
    today = current_date(now)
    if task_range is TaskRange.TODAY:
        return DateWindow(today, today)
    if task_range is TaskRange.TOMORROW:
        tomorrow = today + timedelta(days=1)
        return DateWindow(tomorrow, tomorrow)
    if task_range is TaskRange.WEEK:
        return week_bounds(today)
    raise ValueError(f"Unknown task range: {task_range!r}")


def due_within(column, window: DateWindow) -> ColumnElement[bool]:
    """SQL filter selecting rows whose ``column`` date lies in ``window``.

    Equivalent to comparing the date component of ``column`` against the
    window, expressed as plain timestamp bounds.
    """
    lower, upper = window.as_timestamps()
    return and_(column >= lower, column < upper)
