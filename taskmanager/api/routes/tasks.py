"""Task Routes — CRUD, filtered listing and completion toggle under /api/tasks.

Invariants:
    - Every route requires a session user (get_current_user_id)
    - Query filters are parsed here; blank values mean "no filter"
    - Unknown priority/status values are 400 VALIDATION_ERROR; page/size are clamped
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from taskmanager.api.dependencies import get_current_user_id, get_task_service
from taskmanager.core.domain_types import (
    DEFAULT_PAGE, DEFAULT_PAGE_SIZE, Priority, TaskStatusFilter, UserId,
)
from taskmanager.core.errors import DomainValidationError
from taskmanager.schemas.error import (
    NOT_FOUND_RESPONSE, UNAUTHORIZED_RESPONSE, VALIDATION_RESPONSE,
)
from taskmanager.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskmanager.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/tasks", tags=["tasks"], responses=UNAUTHORIZED_RESPONSE,
)


def parse_category_filter(raw: str | None) -> UUID | None:
    if raw is None or not raw.strip():
        return None
    try:
        return UUID(raw.strip())
    except ValueError:
        raise DomainValidationError(
            f"Invalid category ID format: {raw}", field="category",
        )


def parse_priority_filter(raw: str | None) -> Priority | None:
    if raw is None or not raw.strip():
        return None
    try:
        return Priority(raw.strip().upper())
    except ValueError:
        raise DomainValidationError(
            "Invalid priority value. Must be HIGH, MEDIUM, or LOW",
            field="priority",
        )


def parse_status_filter(raw: str | None) -> bool | None:
    if raw is None or not raw.strip():
        return None
    try:
        return TaskStatusFilter(raw.strip().lower()).as_completed_flag()
    except ValueError:
        raise DomainValidationError(
            "Invalid status value. Must be 'active' or 'completed'",
            field="status",
        )


@router.get("", response_model=list[TaskResponse], responses=VALIDATION_RESPONSE)
async def list_tasks(
    category: str | None = Query(None, description="Filter by category UUID"),
    priority: str | None = Query(None, description="HIGH, MEDIUM or LOW"),
    task_status: str | None = Query(
        None, alias="status", description="'active' or 'completed'",
    ),
    page: int = Query(DEFAULT_PAGE, description="Page number (0-based)"),
    size: int = Query(DEFAULT_PAGE_SIZE, description="Page size (1-100)"),
    user_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    """List the user's tasks, newest first."""
    result = await tasks.list_tasks(
        user_id,
        category_id=parse_category_filter(category),
        priority=parse_priority_filter(priority),
        completed=parse_status_filter(task_status),
        page=page,
        size=size,
    )
    return [TaskResponse.from_model(t) for t in result]


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED, responses=VALIDATION_RESPONSE,
)
async def create_task(
    body: TaskCreate,
    user_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    task = await tasks.create_task(user_id, body)
    return TaskResponse.from_model(task)


@router.get("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND_RESPONSE)
async def get_task(
    task_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    task = await tasks.get_owned_task(user_id, task_id)
    return TaskResponse.from_model(task)


@router.put(
    "/{task_id}", response_model=TaskResponse,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
async def update_task(
    task_id: UUID,
    body: TaskUpdate,
    user_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    """Partial update: omitted or null fields keep their value."""
    task = await tasks.update_task(user_id, task_id, body)
    return TaskResponse.from_model(task)


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_task(
    task_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    await tasks.delete_task(user_id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{task_id}/complete", response_model=TaskResponse,
    responses=NOT_FOUND_RESPONSE,
)
async def toggle_task_completion(
    task_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    """Toggle complete/incomplete; completing stamps completedAt, reopening clears it."""
    task = await tasks.toggle_completion(user_id, task_id)
    return TaskResponse.from_model(task)
