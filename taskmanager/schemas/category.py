"""Category Schemas — create/update payloads and the response DTO.

Invariants:
    - name: 1-50 chars, stripped, non-empty
    - colorCode: exactly '#' + 6 hex digits
    - CategoryUpdate fields all optional; only non-null fields are applied
"""

from uuid import UUID

from pydantic import Field, field_validator

from taskmanager.core.domain_types import (
    CATEGORY_NAME_MAX_LENGTH, COLOR_CODE_PATTERN,
)
from taskmanager.models.category import Category
from taskmanager.schemas.base import CamelModel, UtcDateTime, strip_required


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH)
    color_code: str = Field(pattern=COLOR_CODE_PATTERN)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v, "name")


class CategoryUpdate(CamelModel):
    name: str | None = Field(
        None, min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH,
    )
    color_code: str | None = Field(None, pattern=COLOR_CODE_PATTERN)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return None if v is None else strip_required(v, "name")


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    color_code: str | None
    is_default: bool
    created_at: UtcDateTime
    task_count: int

    @classmethod
    def from_model(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            color_code=category.color_code,
            is_default=category.is_default,
            created_at=category.created_at,
            task_count=len(category.tasks),
        )
