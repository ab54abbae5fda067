# quote_scribe\adapters\api\main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import structlog

from quote_scribe import __version__
from quote_scribe.shared.container import container
from quote_scribe.shared.config import settings, AppEnv
from quote_scribe.shared.logging_config import configure_logging
from quote_scribe.shared.telemetry import flush_telemetry, instrument_fastapi, setup_telemetry
from quote_scribe.adapters.api.errors import register_exception_handlers

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from quote_scribe.adapters.api.routers import (
    data,
    favorites,
    generation,
    health,
    quotes,
    reflections,
    settings as settings_router,
)

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: Wires DI container, checks storage.
    2. Shutdown: Flushes pending spans; every write is already on disk.
    """
    logger.info("app_startup", env=settings.APP_ENV.value, backend=settings.STORAGE_BACKEND.value)

    # 1. Wire the Container
    # We must explicitly tell the container which modules use the @inject decorator.
    container.wire(modules=[
        "quote_scribe.adapters.api.routers.quotes",
        "quote_scribe.adapters.api.routers.favorites",
        "quote_scribe.adapters.api.routers.reflections",
        "quote_scribe.adapters.api.routers.generation",
        "quote_scribe.adapters.api.routers.settings",
        "quote_scribe.adapters.api.routers.data",
        "quote_scribe.adapters.api.routers.health",
    ])

    # 2. Fail fast on an unusable storage directory, but keep serving /health
    if not container.entity_store().health_check():
        logger.error("storage_unavailable", path=settings.STORAGE_PATH)

    yield

    logger.info("app_shutdown")
    flush_telemetry()
    container.unwire()

def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()
    setup_telemetry()

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Local store for generated quotes, favorites and reflections",
        lifespan=lifespan,
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url=None,
    )

    # Local single-user service: the browser front end may be served from anywhere
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    instrument_fastapi(app)
    register_exception_handlers(app)

    # Register Routers
    app.include_router(health.router)
    app.include_router(quotes.router)
    app.include_router(favorites.router)
    app.include_router(reflections.router)
    app.include_router(generation.router)
    app.include_router(settings_router.router)
    app.include_router(data.router)

    return app

