"""Category Repository — user-scoped category queries.

Invariants:
    - list_by_user orders by name for stable UI display
    - Blank user_id is a programming error (ValueError), not a client error
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.models.category import Category


def _require_user_id(user_id: str) -> None:
    if not user_id or not user_id.strip():
        raise ValueError("User ID cannot be null or blank")


class CategoryRepository:
    """Data access for Category rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, category_id: UUID) -> Category | None:
        return await self.db.get(Category, category_id)

    async def list_by_user(self, user_id: str) -> list[Category]:
        _require_user_id(user_id)
        result = await self.db.execute(
            select(Category)
            .where(Category.user_id == user_id)
            .order_by(Category.name),
        )
        return list(result.scalars().all())

    async def count_by_user(self, user_id: str) -> int:
        _require_user_id(user_id)
        result = await self.db.execute(
            select(func.count())
            .select_from(Category)
            .where(Category.user_id == user_id),
        )
        return result.scalar_one()

    async def exists_by_user_and_name(self, user_id: str, name: str) -> bool:
        _require_user_id(user_id)
        if not name or not name.strip():
            raise ValueError("Category name cannot be null or blank")
        result = await self.db.execute(
            select(func.count())
            .select_from(Category)
            .where(Category.user_id == user_id, Category.name == name),
        )
        return result.scalar_one() > 0

    def add(self, category: Category) -> None:
        self.db.add(category)

    async def delete(self, category: Category) -> None:
        await self.db.delete(category)
