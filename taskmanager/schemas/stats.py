"""Stats Schemas — completion summary and daily history entries."""

import datetime as dt

from taskmanager.schemas.base import CamelModel


class CompletionStats(CamelModel):
    today_count: int
    week_count: int
    total_count: int
    completion_rate: float


class CompletionHistoryEntry(CamelModel):
    date: dt.date
    count: int
