"""Completion Stats — pure date arithmetic and bucketing for statistics, no IO.

Invariants:
    - Calendar days are UTC days
    - Weeks start on Monday 00:00
    - build_daily_history returns exactly `days` entries, oldest first, ending at `today`
    - Days without completions appear with count 0 (dense series)
    - completion_rate is a percentage rounded to 2 decimals; 0.0 when there are no tasks

Design Decisions:
    - Pure functions, not service methods: the service does the counting queries,
      these turn counts and timestamps into presentation values
    - Naive datetimes are read as UTC: SQLite drops tzinfo on round-trip
"""

from collections import Counter
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def start_of_day(day: date) -> datetime:
    """Midnight UTC at the start of `day`."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def start_of_week(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def history_window_start(today: date, days: int) -> date:
    """First day of a `days`-long window ending at `today` (inclusive)."""
    return today - timedelta(days=days - 1)


def as_utc(moment: datetime) -> datetime:
    """Same instant in UTC; naive values are taken to already be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def as_utc_date(moment: datetime) -> date:
    return as_utc(moment).date()


def build_daily_history(
    completion_times: Iterable[datetime], today: date, days: int,
) -> list[tuple[date, int]]:
    """Bucket completion timestamps per day into a dense series."""
    counts = Counter(as_utc_date(t) for t in completion_times)
    window_start = history_window_start(today, days)
    return [
        (day, counts.get(day, 0))
        for day in (window_start + timedelta(days=i) for i in range(days))
    ]


def completion_rate(completed: int, total: int) -> float:
    """Share of completed tasks as a percentage, 2 decimals."""
    if total <= 0:
        return 0.0
    return round(completed / total * 100.0, 2)
