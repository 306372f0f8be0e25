"""Domain Types — enums and bounds shared by models, schemas and services.

Invariants:
    - Priority is persisted by name (HIGH/MEDIUM/LOW), never by ordinal
    - Field length bounds defined once here; schemas and models import them
    - UserId is the bare session username (no user table)

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - NewType for UserId: zero runtime cost, documents intent at service seams
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


# ─── Bounds ──────────────────────────────────────────────────────

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000
CATEGORY_NAME_MAX_LENGTH = 50
COLOR_CODE_LENGTH = 7
COLOR_CODE_PATTERN = r"^#[0-9A-Fa-f]{6}$"
USERNAME_MAX_LENGTH = 50
USER_ID_MAX_LENGTH = 100

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

DEFAULT_HISTORY_DAYS = 30
MAX_HISTORY_DAYS = 365


# ─── Enums ───────────────────────────────────────────────────────

class Priority(str, Enum):
    """Task priority. MEDIUM is the default for new tasks."""
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class TaskStatusFilter(str, Enum):
    """`status` query values for task listing."""
    ACTIVE = "active"
    COMPLETED = "completed"

    def as_completed_flag(self) -> bool:
        return self is TaskStatusFilter.COMPLETED


# (name, color) seeded on a user's first login; cannot be deleted
DEFAULT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Work", "#3B82F6"),
    ("Personal", "#10B981"),
    ("Shopping", "#F59E0B"),
)
