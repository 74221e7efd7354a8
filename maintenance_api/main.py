"""Vehicle Maintenance API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from maintenance_api.core.config import Settings, settings as default_settings
from maintenance_api.core.exceptions import DatabaseUnavailableError, register_exception_handlers
from maintenance_api.db.base import Database, acquire
from maintenance_api.middleware.cors import PermissiveCORSMiddleware
from maintenance_api.routers.vehicles import router as vehicles_router
from maintenance_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Connect once at startup, dispose once at shutdown.

    A Database handed to :func:`create_app` is used as-is and left open.
    """
    settings: Settings = app.state.settings
    owned = False
    if app.state.database is None:
        result = await acquire(settings.database_url, **settings.pool_options)
        if not result.ok:
            logger.critical("Cannot start without a database: %s", result.error)
            raise DatabaseUnavailableError("database unreachable at startup") from result.error
        app.state.database = result.database
        owned = True

    try:
        yield
    finally:
        if owned:
            await app.state.database.close()
            app.state.database = None
            logger.info("Database connection closed")


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or default_settings
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # --- CORS (answers every OPTIONS itself) ---
    app.add_middleware(
        PermissiveCORSMiddleware,
        allow_origin=settings.cors_allow_origin,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Vehicle & maintenance routes ---
    app.include_router(vehicles_router)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health(request: Request):
        database: Database | None = request.app.state.database
        db_ok = await database.ping() if database is not None else False
        return HealthResponse(
            status="ok" if db_ok else "degraded",
            app=settings.app_name,
            env=settings.app_env,
            database=db_ok,
        )

    return app


app = create_app()
