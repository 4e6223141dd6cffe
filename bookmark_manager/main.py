from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from bookmark_manager.core.db import create_tables
from bookmark_manager.core.environment import get_session_secret, is_production, should_create_tables
from bookmark_manager.core.logging import setup_logging
from bookmark_manager.exceptions import EmailAlreadyRegisteredError, email_already_registered_handler
from bookmark_manager.routers import bookmarks, health, metrics, sessions, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if should_create_tables():
        await create_tables()
        logger.info("Database tables ready.")
    yield
    logger.info("Application shutdown.")


def create_application() -> FastAPI:
    app = FastAPI(title="Bookmark Manager", version="0.1.0", lifespan=lifespan)

    # Register exception handler
    app.add_exception_handler(EmailAlreadyRegisteredError, email_already_registered_handler)

    # Signed-cookie session; handlers read it through SessionContext
    app.add_middleware(
        SessionMiddleware,
        secret_key=get_session_secret(),
        session_cookie="bookmark_manager_session",
        https_only=is_production(),
    )

    app.include_router(health.router)
    app.include_router(metrics.router)
    app.include_router(users.router)
    app.include_router(sessions.router)
    app.include_router(bookmarks.router)

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse("/bookmarks")

    return app


app = create_application()
