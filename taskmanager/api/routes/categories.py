"""Category Routes — CRUD under /api/categories.

Invariants:
    - Every route requires a session user (get_current_user_id)
    - POST returns 201 with a Location header pointing at the new category
    - DELETE of a default category is 400, of another user's category 404
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from taskmanager.api.dependencies import get_category_service, get_current_user_id
from taskmanager.core.domain_types import UserId
from taskmanager.schemas.category import (
    CategoryCreate, CategoryResponse, CategoryUpdate,
)
from taskmanager.schemas.error import (
    NOT_FOUND_RESPONSE, UNAUTHORIZED_RESPONSE, VALIDATION_RESPONSE,
)
from taskmanager.services.category_service import CategoryService

router = APIRouter(
    prefix="/api/categories", tags=["categories"],
    responses=UNAUTHORIZED_RESPONSE,
)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    user_id: UserId = Depends(get_current_user_id),
    categories: CategoryService = Depends(get_category_service),
):
    """All of the user's categories, ordered by name."""
    result = await categories.list_categories(user_id)
    return [CategoryResponse.from_model(c) for c in result]


@router.post(
    "", response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED, responses=VALIDATION_RESPONSE,
)
async def create_category(
    body: CategoryCreate,
    response: Response,
    user_id: UserId = Depends(get_current_user_id),
    categories: CategoryService = Depends(get_category_service),
):
    category = await categories.create_category(user_id, body)
    response.headers["Location"] = f"/api/categories/{category.id}"
    return CategoryResponse.from_model(category)


@router.get(
    "/{category_id}", response_model=CategoryResponse,
    responses=NOT_FOUND_RESPONSE,
)
async def get_category(
    category_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    categories: CategoryService = Depends(get_category_service),
):
    category = await categories.get_owned_category(user_id, category_id)
    return CategoryResponse.from_model(category)


@router.put(
    "/{category_id}", response_model=CategoryResponse,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
async def update_category(
    category_id: UUID,
    body: CategoryUpdate,
    user_id: UserId = Depends(get_current_user_id),
    categories: CategoryService = Depends(get_category_service),
):
    category = await categories.update_category(user_id, category_id, body)
    return CategoryResponse.from_model(category)


@router.delete(
    "/{category_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
async def delete_category(
    category_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    categories: CategoryService = Depends(get_category_service),
):
    """Delete a custom category together with its tasks."""
    await categories.delete_category(user_id, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
