"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every row carries user_id; all access is scoped by it

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from taskmanager.models.category import Category  # noqa: F401
from taskmanager.models.task import Task  # noqa: F401
