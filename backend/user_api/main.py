"""User Directory API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every failure as plain text
    - Database reachable before the first request is served: a failed ping
      aborts startup and the server process exits
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import users
from user_api.config import get_settings
from user_api.core.errors import StorageError
from user_api.infrastructure.database import init_db
from user_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.sqlalchemy_url)
    try:
        await manager.ping()
    except StorageError as e:
        logger.critical(
            f"Database unreachable at {settings.safe_database_url}: {e.message}",
            extra={"error_code": e.code},
        )
        await manager.dispose()
        raise
    logger.info(f"Connected to {settings.safe_database_url}")
    yield
    logger.info("User API shutting down")
    await manager.dispose()


# Trailing-slash variants are unknown paths (404), not redirects
app = FastAPI(
    title="User Directory API", version="1.0.0", lifespan=lifespan,
    redirect_slashes=False,
)

register_error_handlers(app)

app.include_router(users.router)
