"""
FastAPI application entry point for the promptgen API.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from promptgen.api.errors import setup_error_handlers
from promptgen.api.generate import router as generate_router
from promptgen.api.schemas import HealthResponse
from promptgen.api.v1 import v1_router
from promptgen.infra.config.logging_config import get_logger, setup_logging
from promptgen.infra.config.settings import Settings, get_settings
from promptgen.infra.middleware.request_context import RequestContextMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = app.state.settings

    # Startup
    setup_logging(settings.log_level, settings.get_log_format())
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        version=settings.version,
        environment=settings.environment,
    )

    yield

    # Shutdown
    logger.info("app.shutdown", app_name=settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Prompt processing service",
        version=settings.version,
        debug=settings.debug,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Request context + logging middleware
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    # Include routers
    app.include_router(generate_router)
    app.include_router(v1_router, prefix="/api", include_in_schema=False)

    @app.get("/")
    async def root():
        """Liveness endpoint."""
        return {
            "message": f"{settings.app_name} is running",
            "version": settings.version,
            "status": "healthy",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Detailed health check endpoint."""
        return HealthResponse(
            status="healthy", service=settings.app_name, version=settings.version
        )

    return app


# Create FastAPI application
app = create_app()
