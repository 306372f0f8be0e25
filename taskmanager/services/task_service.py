"""Task Service — filtered listing, CRUD and completion toggling for tasks.

Invariants:
    - A task owned by another user is reported exactly like a missing one
    - A task's category must exist and belong to the same user
    - completed and completed_at change together (Task.mark_*)
    - Pagination out of range is clamped, never rejected

Design Decisions:
    - Category problems on create/update are validation errors on field
      "categoryId": the task body is what is wrong, not the URL
    - Clock injected (defaults to utc_now) so completion stamps are testable
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.core.completion_stats import utc_now
from taskmanager.core.domain_types import Priority, UserId
from taskmanager.core.errors import DomainValidationError, ResourceNotFoundError
from taskmanager.core.pagination import clamp_page_request
from taskmanager.models.category import Category
from taskmanager.models.task import Task
from taskmanager.repositories.category_repository import CategoryRepository
from taskmanager.repositories.task_repository import TaskRepository
from taskmanager.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskService:
    """Business rules for a user's tasks."""

    def __init__(
        self, db: AsyncSession, clock: Callable[[], datetime] = utc_now,
    ):
        self.db = db
        self.tasks = TaskRepository(db)
        self.categories = CategoryRepository(db)
        self.clock = clock

    async def list_tasks(
        self,
        user_id: UserId,
        category_id: UUID | None = None,
        priority: Priority | None = None,
        completed: bool | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> list[Task]:
        page_request = clamp_page_request(page, size)
        if (page, size) != (page_request.page, page_request.size):
            logger.debug(
                f"Clamped pagination page={page} size={size} -> "
                f"page={page_request.page} size={page_request.size}",
            )
        return await self.tasks.list_by_user(
            user_id, page_request,
            category_id=category_id, priority=priority, completed=completed,
        )

    async def get_owned_task(self, user_id: UserId, task_id: UUID) -> Task:
        """Load a task the user owns, or raise not-found."""
        task = await self.tasks.get(task_id)
        if task is None or task.user_id != user_id:
            raise ResourceNotFoundError(f"Task not found with ID: {task_id}")
        return task

    async def create_task(self, user_id: UserId, body: TaskCreate) -> Task:
        category = await self._owned_category_for_task(user_id, body.category_id)
        task = Task(
            title=body.title,
            description=body.description,
            category=category,
            priority=body.priority,
            completed=False,
            completed_at=None,
            user_id=user_id,
        )
        self.tasks.add(task)
        await self.db.commit()
        logger.info(
            f"Created task for user={user_id}",
            extra={"user_id": user_id, "task_id": task.id},
        )
        return task

    async def update_task(
        self, user_id: UserId, task_id: UUID, body: TaskUpdate,
    ) -> Task:
        """Apply the non-null fields of `body`."""
        task = await self.get_owned_task(user_id, task_id)
        if body.title is not None:
            task.title = body.title
        if body.description is not None:
            task.description = body.description
        if body.category_id is not None:
            task.category = await self._owned_category_for_task(
                user_id, body.category_id,
            )
        if body.priority is not None:
            task.priority = body.priority
        await self.db.commit()
        logger.info(
            f"Updated task {task_id}",
            extra={"user_id": user_id, "task_id": task_id},
        )
        return task

    async def delete_task(self, user_id: UserId, task_id: UUID) -> None:
        task = await self.get_owned_task(user_id, task_id)
        await self.tasks.delete(task)
        await self.db.commit()
        logger.info(
            f"Deleted task {task_id}",
            extra={"user_id": user_id, "task_id": task_id},
        )

    async def toggle_completion(self, user_id: UserId, task_id: UUID) -> Task:
        """Flip completion: stamp completed_at on complete, clear it on reopen."""
        task = await self.get_owned_task(user_id, task_id)
        if task.completed:
            task.mark_incomplete()
        else:
            task.mark_completed(self.clock())
        await self.db.commit()
        logger.info(
            f"Task {task_id} marked {'complete' if task.completed else 'incomplete'}",
            extra={"user_id": user_id, "task_id": task_id},
        )
        return task

    async def _owned_category_for_task(
        self, user_id: UserId, category_id: UUID,
    ) -> Category:
        category = await self.categories.get(category_id)
        if category is None:
            raise DomainValidationError(
                f"Category not found with ID: {category_id}", field="categoryId",
            )
        if category.user_id != user_id:
            raise DomainValidationError(
                "Category does not belong to user", field="categoryId",
            )
        return category
