"""Stats Service — completion counts, completion rate and daily history.

Invariants:
    - history length == days, days in [1, MAX_HISTORY_DAYS]
    - Counting happens in SQL; date bucketing in core/completion_stats.py

Design Decisions:
    - Clock injected so "today" and "this week" are testable
"""

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.core.completion_stats import (
    build_daily_history, completion_rate, history_window_start,
    start_of_day, start_of_week, utc_now,
)
from taskmanager.core.domain_types import MAX_HISTORY_DAYS, UserId
from taskmanager.core.errors import DomainValidationError
from taskmanager.repositories.task_repository import TaskRepository
from taskmanager.schemas.stats import CompletionHistoryEntry, CompletionStats

logger = logging.getLogger(__name__)


class StatsService:
    """Read-only completion statistics for one user."""

    def __init__(
        self, db: AsyncSession, clock: Callable[[], datetime] = utc_now,
    ):
        self.tasks = TaskRepository(db)
        self.clock = clock

    async def get_completion_stats(self, user_id: UserId) -> CompletionStats:
        today = self.clock().date()
        today_count = await self.tasks.count_completed(
            user_id, since=start_of_day(today),
        )
        week_count = await self.tasks.count_completed(
            user_id, since=start_of_day(start_of_week(today)),
        )
        total_count = await self.tasks.count_completed(user_id)
        all_tasks = await self.tasks.count_by_user(user_id)
        rate = completion_rate(total_count, all_tasks)
        logger.debug(
            f"Stats for user {user_id}: today={today_count}, week={week_count}, "
            f"total={total_count}, rate={rate:.2f}%",
        )
        return CompletionStats(
            today_count=today_count,
            week_count=week_count,
            total_count=total_count,
            completion_rate=rate,
        )

    async def get_completion_history(
        self, user_id: UserId, days: int,
    ) -> list[CompletionHistoryEntry]:
        """Dense per-day completion counts for the last `days` days, oldest first."""
        if days < 1 or days > MAX_HISTORY_DAYS:
            raise DomainValidationError(
                f"Days must be between 1 and {MAX_HISTORY_DAYS}", field="days",
            )
        today = self.clock().date()
        since = start_of_day(history_window_start(today, days))
        times = await self.tasks.completion_times(user_id, since)
        return [
            CompletionHistoryEntry(date=day, count=count)
            for day, count in build_daily_history(times, today, days)
        ]
