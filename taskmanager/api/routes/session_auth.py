"""Session Auth — demo login by username, current user, logout.

Invariants:
    - Login seeds default categories, then stores the username in the signed session;
      a failed seeding leaves the client anonymous
    - GET /user returns 401 for anonymous sessions
    - Logout always succeeds (204), even for anonymous sessions

Design Decisions:
    - No password, no user table: identity is the bare username (demo mode)
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from taskmanager.api.dependencies import (
    clear_session, get_category_service, get_current_user_id, set_session_user,
)
from taskmanager.core.domain_types import UserId
from taskmanager.schemas.error import UNAUTHORIZED_RESPONSE, VALIDATION_RESPONSE
from taskmanager.schemas.session import UserDTO
from taskmanager.services.category_service import CategoryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/session", tags=["session"])


@router.post("/login", response_model=UserDTO, responses=VALIDATION_RESPONSE)
async def login(
    body: UserDTO,
    request: Request,
    categories: CategoryService = Depends(get_category_service),
):
    """Log in with a username; first login seeds Work/Personal/Shopping."""
    await categories.ensure_default_categories(UserId(body.username))
    set_session_user(request, body.username)
    logger.info("User logged in", extra={"user_id": body.username})
    return body


@router.get("/user", response_model=UserDTO, responses=UNAUTHORIZED_RESPONSE)
async def current_user(user_id: UserId = Depends(get_current_user_id)):
    return UserDTO(username=user_id)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(request: Request):
    clear_session(request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
