"""Request Dependencies — session identity and per-request service construction.

Invariants:
    - The authenticated identity is request.session["user_id"] (signed cookie)
    - Missing identity raises UnauthorizedError (401), never a redirect
    - Services are built per request around the request's AsyncSession

Design Decisions:
    - dev_auto_login_user writes the configured user into anonymous sessions:
      lets the frontend dev server run without a login step
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.config import get_settings
from taskmanager.core.domain_types import UserId
from taskmanager.core.errors import UnauthorizedError
from taskmanager.infrastructure.database import get_db
from taskmanager.services.category_service import CategoryService
from taskmanager.services.stats_service import StatsService
from taskmanager.services.task_service import TaskService

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"


def set_session_user(request: Request, username: str) -> None:
    if not username or not username.strip():
        raise ValueError("User ID cannot be null or blank")
    request.session[SESSION_USER_KEY] = username


def clear_session(request: Request) -> None:
    request.session.clear()


def get_current_user_id(request: Request) -> UserId:
    """Resolve the logged-in user from the session or raise 401."""
    user_id = request.session.get(SESSION_USER_KEY)
    if isinstance(user_id, str) and user_id.strip():
        return UserId(user_id)
    dev_user = get_settings().dev_auto_login_user
    if dev_user:
        logger.debug(f"Dev auto-login as {dev_user}", extra={"user_id": dev_user})
        set_session_user(request, dev_user)
        return UserId(dev_user)
    raise UnauthorizedError()


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(db)


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_stats_service(db: AsyncSession = Depends(get_db)) -> StatsService:
    return StatsService(db)
