"""Stats Service — completion counts, rate and dense daily history with a frozen clock.

Scenario (clock: Wednesday 2026-10-14 12:00 UTC, week starts Monday 10-12):
    - completed 10-14 10:00, 10-12 09:00, 10-11 18:00, 10-05 08:00
    - one open task
"""

from datetime import date, datetime, timezone

import pytest

from taskmanager.core.errors import DomainValidationError
from taskmanager.schemas.task import TaskCreate
from tests.services.conftest import ALICE, BOB


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
async def scenario(seeded, task_service, test_db):
    categories = await seeded.list_categories(ALICE)
    work = next(c for c in categories if c.name == "Work")
    stamps = [
        _utc(2026, 10, 14, 10),
        _utc(2026, 10, 12, 9),
        _utc(2026, 10, 11, 18),
        _utc(2026, 10, 5, 8),
    ]
    for i, stamp in enumerate(stamps):
        task = await task_service.create_task(
            ALICE, TaskCreate(title=f"Done {i}", category_id=work.id),
        )
        task.mark_completed(stamp)
    await task_service.create_task(
        ALICE, TaskCreate(title="Open", category_id=work.id),
    )
    await test_db.commit()


async def test_summary_counts(stats_service, scenario):
    stats = await stats_service.get_completion_stats(ALICE)
    assert stats.today_count == 1
    assert stats.week_count == 2
    assert stats.total_count == 4
    assert stats.completion_rate == 80.0


async def test_summary_for_user_without_tasks(stats_service, scenario):
    stats = await stats_service.get_completion_stats(BOB)
    assert stats.total_count == 0
    assert stats.completion_rate == 0.0


async def test_history_is_dense_and_ends_today(stats_service, scenario):
    history = await stats_service.get_completion_history(ALICE, 7)
    assert [e.date for e in history] == [
        date(2026, 10, d) for d in range(8, 15)
    ]
    assert [e.count for e in history] == [0, 0, 0, 1, 1, 0, 1]


async def test_history_window_excludes_older_completions(stats_service, scenario):
    history = await stats_service.get_completion_history(ALICE, 3)
    assert [(e.date, e.count) for e in history] == [
        (date(2026, 10, 12), 1),
        (date(2026, 10, 13), 0),
        (date(2026, 10, 14), 1),
    ]


async def test_history_longer_window_picks_up_everything(stats_service, scenario):
    history = await stats_service.get_completion_history(ALICE, 30)
    assert len(history) == 30
    assert sum(e.count for e in history) == 4


async def test_reopened_task_leaves_history(stats_service, task_service, scenario):
    tasks = await task_service.list_tasks(ALICE, completed=True)
    latest = next(t for t in tasks if t.title == "Done 0")
    await task_service.toggle_completion(ALICE, latest.id)

    history = await stats_service.get_completion_history(ALICE, 1)
    assert history[0].count == 0


@pytest.mark.parametrize("days", [0, -1, 366])
async def test_history_days_out_of_range(stats_service, days):
    with pytest.raises(DomainValidationError) as exc_info:
        await stats_service.get_completion_history(ALICE, days)
    assert exc_info.value.field == "days"
