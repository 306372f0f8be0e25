"""Task Manager API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskManagerError → {message, field?, code} JSON
    - CORS and session cookie configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Signed-cookie sessions (SessionMiddleware): single-node demo, no session store
    - allow_credentials=True: the Astro frontend sends the session cookie cross-origin in dev
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from taskmanager.api.error_handlers import register_error_handlers
from taskmanager.api.routes import categories, health, session_auth, stats, tasks
from taskmanager.config import get_settings
from taskmanager.infrastructure.database import init_db
from taskmanager.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("Task Manager API started")
    yield
    await manager.dispose()
    logger.info("Task Manager API shutting down")


app = FastAPI(
    title="Task Manager API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    session_cookie=settings.session_cookie_name,
    max_age=settings.session_max_age_seconds,
    same_site="lax",
    https_only=settings.session_https_only,
)

app.include_router(health.router)
app.include_router(session_auth.router)
app.include_router(tasks.router)
app.include_router(categories.router)
app.include_router(stats.router)

register_error_handlers(app)
