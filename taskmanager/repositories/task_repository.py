"""Task Repository — filtered, paginated and aggregate task queries.

Invariants:
    - Filters (category, priority, completed) combine with AND; None means "any"
    - Listing is always ordered by created_at DESC
    - Pagination inputs are assumed already clamped (see core/pagination.py)
    - Loaded tasks carry their category with its task collection (taskCount)
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from taskmanager.core.domain_types import Priority
from taskmanager.core.pagination import PageRequest
from taskmanager.models.category import Category
from taskmanager.models.task import Task

logger = logging.getLogger(__name__)

# The relationship-level selectin chain stops at the Task -> Category -> Task
# cycle; the collection must be requested explicitly.
WITH_CATEGORY = (selectinload(Task.category).selectinload(Category.tasks),)


def _require_user_id(user_id: str) -> None:
    if not user_id or not user_id.strip():
        raise ValueError("User ID cannot be null or blank")


class TaskRepository:
    """Data access for Task rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, task_id: UUID) -> Task | None:
        return await self.db.get(Task, task_id, options=WITH_CATEGORY)

    async def list_by_user(
        self,
        user_id: str,
        page_request: PageRequest,
        category_id: UUID | None = None,
        priority: Priority | None = None,
        completed: bool | None = None,
    ) -> list[Task]:
        """User's tasks matching every non-None filter, newest first."""
        _require_user_id(user_id)
        query = (
            select(Task)
            .options(*WITH_CATEGORY)
            .where(Task.user_id == user_id)
        )
        if category_id is not None:
            query = query.where(Task.category_id == category_id)
        if priority is not None:
            query = query.where(Task.priority == priority)
        if completed is not None:
            query = query.where(Task.completed.is_(completed))
        query = (
            query.order_by(Task.created_at.desc())
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await self.db.execute(query)
        tasks = list(result.scalars().all())
        logger.debug(
            f"Found {len(tasks)} tasks for user={user_id} "
            f"(category={category_id}, priority={priority}, "
            f"completed={completed}, page={page_request.page}, "
            f"size={page_request.size})",
        )
        return tasks

    async def count_by_user(self, user_id: str) -> int:
        _require_user_id(user_id)
        result = await self.db.execute(
            select(func.count()).select_from(Task).where(Task.user_id == user_id),
        )
        return result.scalar_one()

    async def count_completed(
        self, user_id: str, since: datetime | None = None,
    ) -> int:
        """Completed tasks, optionally only those completed at or after `since`."""
        _require_user_id(user_id)
        query = (
            select(func.count())
            .select_from(Task)
            .where(Task.user_id == user_id, Task.completed.is_(True))
        )
        if since is not None:
            query = query.where(Task.completed_at >= since)
        result = await self.db.execute(query)
        return result.scalar_one()

    async def completion_times(
        self, user_id: str, since: datetime,
    ) -> list[datetime]:
        """completed_at of every task completed at or after `since`, oldest first."""
        _require_user_id(user_id)
        result = await self.db.execute(
            select(Task.completed_at)
            .where(
                Task.user_id == user_id,
                Task.completed.is_(True),
                Task.completed_at >= since,
            )
            .order_by(Task.completed_at),
        )
        return list(result.scalars().all())

    def add(self, task: Task) -> None:
        self.db.add(task)

    async def delete(self, task: Task) -> None:
        await self.db.delete(task)
