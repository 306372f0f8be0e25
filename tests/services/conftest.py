"""Service test fixtures — services bound to the in-memory DB with a fixed clock.

Invariants:
    - Services talk to the test AsyncSession directly (no HTTP layer)
    - The clock is frozen at Wednesday 2026-10-14 12:00 UTC

Design Decisions:
    - Frozen clock injected through the service constructors, not patched
      globally: "today" and "this week" are then deterministic
"""

from datetime import datetime, timezone

import pytest

from taskmanager.core.domain_types import UserId
from taskmanager.services.category_service import CategoryService
from taskmanager.services.stats_service import StatsService
from taskmanager.services.task_service import TaskService

FROZEN_NOW = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)

ALICE = UserId("alice")
BOB = UserId("bob")


@pytest.fixture
def frozen_clock():
    return lambda: FROZEN_NOW


@pytest.fixture
def category_service(test_db):
    return CategoryService(test_db)


@pytest.fixture
def task_service(test_db, frozen_clock):
    return TaskService(test_db, clock=frozen_clock)


@pytest.fixture
def stats_service(test_db, frozen_clock):
    return StatsService(test_db, clock=frozen_clock)


@pytest.fixture
async def seeded(category_service):
    """alice and bob with their default categories."""
    await category_service.ensure_default_categories(ALICE)
    await category_service.ensure_default_categories(BOB)
    return category_service
