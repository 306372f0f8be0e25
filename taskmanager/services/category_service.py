"""Category Service — default seeding, CRUD and ownership checks for categories.

Invariants:
    - A category owned by another user is reported exactly like a missing one
    - Category names are unique per user (checked before insert/rename)
    - Default categories (Work, Personal, Shopping) cannot be deleted
    - Seeding runs only for users with zero categories (idempotent)
    - A (user_id, name) unique violation at commit is reported like the
      pre-check would have reported it (concurrent requests)

Design Decisions:
    - Duplicate names are validation errors (field="name"), not a separate conflict code
    - New categories are created with an empty, already-loaded task collection:
      taskCount can be read after commit without a lazy load
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.core.domain_types import DEFAULT_CATEGORIES, UserId
from taskmanager.core.errors import (
    DomainValidationError, ErrorCategory, ResourceNotFoundError,
)
from taskmanager.models.category import Category
from taskmanager.repositories.category_repository import CategoryRepository
from taskmanager.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found"


class CategoryService:
    """Business rules for a user's categories."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.categories = CategoryRepository(db)

    async def ensure_default_categories(self, user_id: UserId) -> bool:
        """Seed the three default categories on a user's first login.

        Returns True when categories were created.
        """
        if await self.categories.count_by_user(user_id) > 0:
            return False
        logger.info(
            f"Seeding default categories for user: {user_id}",
            extra={"user_id": user_id},
        )
        for name, color in DEFAULT_CATEGORIES:
            self.categories.add(Category(
                name=name, color_code=color, is_default=True,
                user_id=user_id, tasks=[],
            ))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info(
                f"Default categories already seeded concurrently for user: {user_id}",
                extra={"user_id": user_id},
            )
            return False
        return True

    async def list_categories(self, user_id: UserId) -> list[Category]:
        return await self.categories.list_by_user(user_id)

    async def get_owned_category(
        self, user_id: UserId, category_id: UUID,
    ) -> Category:
        """Load a category the user owns, or raise not-found."""
        category = await self.categories.get(category_id)
        if category is None or category.user_id != user_id:
            raise ResourceNotFoundError(CATEGORY_NOT_FOUND)
        return category

    async def create_category(
        self, user_id: UserId, body: CategoryCreate,
    ) -> Category:
        await self._ensure_name_available(user_id, body.name)
        category = Category(
            name=body.name, color_code=body.color_code, is_default=False,
            user_id=user_id, tasks=[],
        )
        self.categories.add(category)
        await self._commit_unique_name(body.name)
        logger.info(
            f"Created category '{body.name}' for user: {user_id}",
            extra={"user_id": user_id, "category_id": category.id},
        )
        return category

    async def update_category(
        self, user_id: UserId, category_id: UUID, body: CategoryUpdate,
    ) -> Category:
        category = await self.get_owned_category(user_id, category_id)
        if body.name is not None and body.name != category.name:
            await self._ensure_name_available(user_id, body.name)
        if body.name is not None:
            category.name = body.name
        if body.color_code is not None:
            category.color_code = body.color_code
        await self._commit_unique_name(category.name)
        logger.info(
            f"Updated category {category_id} for user: {user_id}",
            extra={"user_id": user_id, "category_id": category_id},
        )
        return category

    async def delete_category(self, user_id: UserId, category_id: UUID) -> None:
        """Delete a non-default category and, by cascade, its tasks."""
        category = await self.get_owned_category(user_id, category_id)
        if not category.can_delete():
            raise DomainValidationError(
                "Cannot delete default categories",
                category=ErrorCategory.BUSINESS_RULE,
            )
        removed_tasks = len(category.tasks)
        await self.categories.delete(category)
        await self.db.commit()
        logger.info(
            f"Deleted category {category_id} ({removed_tasks} tasks) for user: {user_id}",
            extra={"user_id": user_id, "category_id": category_id},
        )

    async def _ensure_name_available(self, user_id: UserId, name: str) -> None:
        if await self.categories.exists_by_user_and_name(user_id, name):
            raise self._duplicate_name(name)

    async def _commit_unique_name(self, name: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise self._duplicate_name(name) from e

    @staticmethod
    def _duplicate_name(name: str) -> DomainValidationError:
        return DomainValidationError(
            f"A category with name '{name}' already exists",
            field="name", category=ErrorCategory.BUSINESS_RULE,
        )
