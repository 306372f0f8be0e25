"""Category ORM — a user's task grouping, owner of its tasks.

Invariants:
    - name is unique per user ((user_id, name) unique constraint)
    - is_default categories are seeded on first login and cannot be deleted
    - Deleting a category deletes its tasks (ORM cascade + FK ON DELETE CASCADE)

Design Decisions:
    - user_id is the bare session username (String, no users table)
    - tasks loaded with selectin: CategoryResponse.taskCount needs the collection
      and async sessions cannot lazy-load
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskmanager.core.completion_stats import utc_now
from taskmanager.core.domain_types import (
    CATEGORY_NAME_MAX_LENGTH, COLOR_CODE_LENGTH, USER_ID_MAX_LENGTH,
)
from taskmanager.db.base import Base


class Category(Base):
    """Category entity — groups a user's tasks."""
    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_category_user_name"),
        Index("idx_category_user", "user_id"),
        Index("idx_category_name", "name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(
        String(CATEGORY_NAME_MAX_LENGTH), nullable=False,
    )
    color_code: Mapped[str | None] = mapped_column(
        String(COLOR_CODE_LENGTH), nullable=True,
    )
    is_default: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    user_id: Mapped[str] = mapped_column(
        String(USER_ID_MAX_LENGTH), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )

    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="category",
        cascade="all, delete-orphan", lazy="selectin",
    )

    def can_delete(self) -> bool:
        return not self.is_default
