"""Task Schemas — create/update payloads and the response DTO.

Invariants:
    - title: 1-200 chars, stripped, non-empty
    - description: at most 2000 chars
    - priority defaults to MEDIUM on create
    - TaskUpdate fields all optional; only non-null fields are applied
"""

from uuid import UUID

from pydantic import Field, field_validator

from taskmanager.core.domain_types import (
    DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, Priority,
)
from taskmanager.models.task import Task
from taskmanager.schemas.base import CamelModel, UtcDateTime, strip_required
from taskmanager.schemas.category import CategoryResponse


class TaskCreate(CamelModel):
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    category_id: UUID
    priority: Priority = Priority.MEDIUM

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return strip_required(v, "title")


class TaskUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    category_id: UUID | None = None
    priority: Priority | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return None if v is None else strip_required(v, "title")


class TaskResponse(CamelModel):
    id: UUID
    title: str
    description: str | None
    category: CategoryResponse
    priority: Priority
    completed: bool
    completed_at: UtcDateTime | None
    created_at: UtcDateTime
    updated_at: UtcDateTime

    @classmethod
    def from_model(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            category=CategoryResponse.from_model(task.category),
            priority=task.priority,
            completed=task.completed,
            completed_at=task.completed_at,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
