"""Users API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UsersApiError → JSON {"error": ...} responses
    - Connection pool built and verified on startup via the lifespan context
      manager, stored on app.state.db, disposed on shutdown
    - Startup failure is fatal: logged, then the process exits non-zero

Design Decisions:
    - Lifespan over @app.on_event
    - Pool handed to routes through the get_db dependency, not a module global
"""

import logging
import sys
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, root, users
from users_api.config import get_settings
from users_api.core.errors import DatabaseError
from users_api.infrastructure.database import DatabaseManager
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseManager.from_settings(settings)
    try:
        await db.verify()
    except DatabaseError:
        logger.critical("Database unavailable at startup, aborting")
        await db.dispose()
        raise
    app.state.db = db
    logger.info("Users API started")
    yield
    logger.info("Users API shutting down")
    await db.dispose()


app = FastAPI(title="Users API", version="1.0.0", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """One log line per request."""
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        logger.info(
            f"{request.method} {request.url.path} {status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )


app.include_router(root.router)
app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app, exit 1 if it cannot start.

    uvicorn reports a failed startup or bind by raising SystemExit with its own
    non-zero status; that is normalized to 1.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    except SystemExit as exc:
        if exc.code in (None, 0):
            raise
        logger.critical(
            f"Server failed to start (uvicorn exit status {exc.code})",
        )
        sys.exit(1)


if __name__ == "__main__":
    run()
