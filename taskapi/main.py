"""FastAPI application factory. No business logic; only wiring and middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from taskapi.api import router as api_router
from taskapi.core.config import Settings, get_settings
from taskapi.core.context import AppContext
from taskapi.core.errors import register_error_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application around an explicit AppContext.

    Without settings, .env is loaded and settings are read from the environment.
    """
    if settings is None:
        load_dotenv()
        settings = get_settings()
    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.DB_CREATE_TABLES:
            context.create_tables()
        logger.info("Task API started: env=%s", settings.APP_ENV)
        yield
        context.dispose()

    app = FastAPI(
        title="Task API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/", response_class=HTMLResponse)
    def root() -> str:
        """Root route; plain banner for quick liveness checks in a browser."""
        return "<h1>Task API Server Running</h1>"

    return app
