"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.auth import AuthMiddleware
from api.models.scheduler import ErrorResponse
from api.routers import common_router, scheduler_router
from api.services.app_initializer import AppServiceInitializer
from core import configure_logging, get_logger
from core.config import Settings, load_settings
from core.scheduler import TaskScheduler

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    if not settings.is_testing:
        configure_logging(settings)
    logger.info(f"Starting GestLoc API server in {settings.environment.value} mode")
    logger.info(f"Authentication required: {settings.auth_required}")

    # Duplicate task names or bad schedules must abort startup
    initializer = AppServiceInitializer(settings, app.state.scheduler)
    await initializer.initialize_all_services(app)
    try:
        await initializer.start_all_services()
    except Exception as e:
        logger.error(f"Failed to start task scheduler: {e}", exc_info=True)

    logger.info("GestLoc API server initialized successfully")

    yield

    try:
        await initializer.stop_all_services()
    except Exception as e:
        logger.error(f"Error stopping task scheduler: {e}", exc_info=True)
    logger.info("GestLoc API server shutting down")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and answer with a failure envelope."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message=str(exc)).model_dump(by_alias=True),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI app with current settings."""
    settings = settings or load_settings()

    app = FastAPI(
        title=settings.api_title,
        description="Backend API for GestLoc rental management background tasks",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    # Sole scheduler for this app; lifespan registers the rent jobs on it
    app.state.scheduler = TaskScheduler(timezone=settings.scheduler_timezone)

    app.add_middleware(AuthMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, global_exception_handler)
    app.include_router(common_router)
    app.include_router(scheduler_router)
    return app


app = create_app()
