from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.init_db import init_db
from app.core.logging_config import configure_logging
from app.routers.admin import router as admin_router
from app.routers.health import router as health_router
from app.routers.weather import router as weather_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    On startup the `weather_data` table is created if missing.
    Nothing needs releasing on shutdown.
    """
    await init_db()
    yield


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    - Configures logging from `LOG_LEVEL`.
    - Registers the routers and the error envelope handlers.
    - Applies the application lifespan handler.

    Returns:
        Configured FastAPI application instance.
    """
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description="Weather report API: simulated readings, history and analysis",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Register API routers
    app.include_router(health_router)
    app.include_router(weather_router)
    app.include_router(admin_router)

    return app


# Application entry point
app = create_app()
