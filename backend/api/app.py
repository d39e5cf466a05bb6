"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from modules.users.routes import router as users_router
from modules.couples.routes import couples_router, pairing_router
from modules.pulse.routes import history_router, router as today_router
from modules.notifications.routes import push_router, router as notifications_router
from modules.shark_mode.routes import router as shark_mode_router
from modules.challenges.routes import router as challenges_router

from .errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Starting %s on %s:%s (storage: %s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.storage_backend,
    )
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Couples mood-sharing API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(users_router, prefix="/users", tags=["users"])
    app.include_router(pairing_router, prefix="/pairing", tags=["pairing"])
    app.include_router(couples_router, prefix="/couples", tags=["couples"])
    app.include_router(today_router, prefix="/today", tags=["today"])
    app.include_router(history_router, prefix="/history", tags=["today"])
    app.include_router(notifications_router, prefix="/notifications", tags=["notifications"])
    app.include_router(push_router, prefix="/push", tags=["push"])
    app.include_router(shark_mode_router, prefix="/shark-mode", tags=["shark-mode"])
    app.include_router(challenges_router, prefix="/challenges", tags=["challenges"])

    return app


# Application instance for uvicorn
app = create_app()
