"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from carbon_tracker.api import (
    analytics_router,
    businesses_router,
    calculations_router,
    categories_router,
    logs_router,
)
from carbon_tracker.core.config import get_config
from carbon_tracker.core.exceptions import (
    CarbonTrackerError,
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    StoreFailureError,
)
from carbon_tracker.database.base import apply_db_migration, get_db_url, get_engine_kw
from carbon_tracker.database.session_manager.db_session import Database
from carbon_tracker.database.session_manager.exceptions import DatabaseTransactionError

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Most specific first; MissingBenchmarkError resolves to ConfigurationError
ERROR_STATUS_CODES = (
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StoreFailureError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
)


def status_code_for(exc: CarbonTrackerError) -> int:
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_routers(app: FastAPI):
    """Register all API routers."""
    app.include_router(categories_router)
    app.include_router(businesses_router)
    app.include_router(logs_router)
    app.include_router(calculations_router)
    app.include_router(analytics_router)


def register_exception_handlers(app: FastAPI):
    """Map domain errors to HTTP responses."""

    @app.exception_handler(CarbonTrackerError)
    async def carbon_tracker_exception_handler(
        request: Request, exc: CarbonTrackerError
    ):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logging.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        else:
            logging.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "context": exc.context},
        )

    @app.exception_handler(DatabaseTransactionError)
    async def transaction_exception_handler(
        request: Request, exc: DatabaseTransactionError
    ):
        logging.error(f"Transaction failed on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Database transaction failed", "context": {}},
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Handles database initialization, optional migrations and cleanup.
    """
    logging.info("Application startup")
    config = app.state.config
    async_db_url = get_db_url(config)

    if config.section("db_options").get("run_migrations", False):
        await apply_db_migration(config)

    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
    logging.info("Initialized database")

    try:
        yield
    finally:
        logging.info("Application shutdown")
        await Database.close()


def get_app(config_file: str) -> FastAPI:
    """
    Application factory function.

    Args:
        config_file: Configuration file name (e.g., "production.toml")

    Returns:
        Configured FastAPI application instance
    """
    config = get_config(config_file)
    api_config = config.section("api")

    app = FastAPI(
        title=api_config.get("title", "Carbon Tracker API"),
        description=api_config.get(
            "description",
            "Carbon accounting API: activity logging, emission analytics "
            "and industry benchmark scores",
        ),
        version=api_config.get("version", "1.0.0"),
        debug=api_config.get("debug", False),
        lifespan=lifespan,
        generate_unique_id_function=lambda route: (
            f"{route.tags[0]}-{route.name}" if route.tags else route.name
        ),
    )

    app.state.config = config

    register_routers(app)
    register_exception_handlers(app)

    # Set up CORS middleware
    origins = api_config.get(
        "cors_origins", ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app
