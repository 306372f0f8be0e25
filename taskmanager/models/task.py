"""Task ORM — a user's to-do item inside one of their categories.

Invariants:
    - completed_at is non-null iff completed is true (mark_* keep them in lockstep)
    - category belongs to the same user_id (enforced by TaskService)
    - created_at immutable; updated_at touched on every UPDATE

Design Decisions:
    - priority stored by name in a VARCHAR(10), not a native enum type:
      adding a level needs no ALTER TYPE
    - category loaded with selectin: every TaskResponse embeds its category
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskmanager.core.completion_stats import utc_now
from taskmanager.core.domain_types import (
    DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, USER_ID_MAX_LENGTH, Priority,
)
from taskmanager.db.base import Base


class Task(Base):
    """Task entity — title, priority and completion state."""
    __tablename__ = "tasks"
    __table_args__ = (
        Index("idx_task_user", "user_id"),
        Index("idx_task_category", "category_id"),
        Index("idx_task_completed", "completed"),
        Index("idx_task_created", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH), nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=True,
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    )
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, native_enum=False, length=10, name="priority"),
        nullable=False, default=Priority.MEDIUM,
    )
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(USER_ID_MAX_LENGTH), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=utc_now, onupdate=utc_now,
    )

    category: Mapped["Category"] = relationship(
        "Category", back_populates="tasks", lazy="selectin",
    )

    def mark_completed(self, now: datetime) -> None:
        self.completed = True
        self.completed_at = now

    def mark_incomplete(self) -> None:
        self.completed = False
        self.completed_at = None
