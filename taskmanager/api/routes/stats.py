"""Stats Routes — completion summary and daily history under /api/stats."""

from fastapi import APIRouter, Depends, Query

from taskmanager.api.dependencies import get_current_user_id, get_stats_service
from taskmanager.core.domain_types import DEFAULT_HISTORY_DAYS, UserId
from taskmanager.schemas.error import UNAUTHORIZED_RESPONSE, VALIDATION_RESPONSE
from taskmanager.schemas.stats import CompletionHistoryEntry, CompletionStats
from taskmanager.services.stats_service import StatsService

router = APIRouter(
    prefix="/api/stats", tags=["stats"], responses=UNAUTHORIZED_RESPONSE,
)


@router.get("/summary", response_model=CompletionStats)
async def completion_summary(
    user_id: UserId = Depends(get_current_user_id),
    stats: StatsService = Depends(get_stats_service),
):
    """Completed today, this week (from Monday), in total, and the completion rate."""
    return await stats.get_completion_stats(user_id)


@router.get(
    "/history", response_model=list[CompletionHistoryEntry],
    responses=VALIDATION_RESPONSE,
)
async def completion_history(
    days: int = Query(DEFAULT_HISTORY_DAYS, description="Days of history (1-365)"),
    user_id: UserId = Depends(get_current_user_id),
    stats: StatsService = Depends(get_stats_service),
):
    """One entry per day, oldest first, ending today; days without completions count 0."""
    return await stats.get_completion_history(user_id, days)
