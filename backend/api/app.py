"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .errors import register_exception_handlers
from .models import ERROR_RESPONSES
from .routes import health
from modules.auth.routes import router as auth_router
from modules.portal.routes import router as portal_router
from modules.plans.routes import router as plans_router
from modules.content.routes import router as content_router
from modules.scheduling.routes import router as scheduling_router
from modules.notifications.routes import router as notifications_router
from modules.admin.routes import router as admin_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = get_settings()
    if not settings.session_secret:
        logger.warning("SESSION_SECRET is not set; authenticated routes will fail")
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
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
        description="Subscription-gated wellness content and appointment booking",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
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
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, tags=["auth"], responses=ERROR_RESPONSES)
    app.include_router(portal_router, tags=["portal"], responses=ERROR_RESPONSES)
    app.include_router(plans_router, tags=["plans"], responses=ERROR_RESPONSES)
    app.include_router(content_router, tags=["content"], responses=ERROR_RESPONSES)
    app.include_router(scheduling_router, tags=["scheduling"], responses=ERROR_RESPONSES)
    app.include_router(notifications_router, tags=["notifications"], responses=ERROR_RESPONSES)
    app.include_router(admin_router, tags=["admin"], responses=ERROR_RESPONSES)

    return app


# Application instance for uvicorn
app = create_app()
