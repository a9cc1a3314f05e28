"""Catalog API main application module.

This module builds the FastAPI application and configures core
middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.api.errors import setup_exception_handlers
from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import setup_middleware
from catalog_api.api.products import router as products_router
from catalog_api.catalog.seed import SEED_PRODUCTS
from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.store import CatalogStore
from catalog_api.infrastructure.config import Settings, settings
from catalog_api.infrastructure.logging import configure_logging

configure_logging(settings.log_level)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    app_settings: Settings = app.state.settings
    logger.info(
        "Starting catalog API",
        version=app_settings.api_version,
        environment=app_settings.environment,
        prefix=app_settings.api_prefix,
        product_count=app.state.catalog_service.count(),
    )

    yield

    logger.info("Shutting down catalog API")


def create_app(
    app_settings: Settings | None = None,
    store: CatalogStore | None = None,
) -> FastAPI:
    """Instantiate the app with its own catalog store.

    Args:
        app_settings: Settings to use; the environment-loaded ones by default.
        store: Catalog store to serve; a new one (seeded when
            ``seed_catalog`` is set) by default.

    Returns:
        Configured FastAPI application.
    """
    app_settings = app_settings or settings
    if store is None:
        store = CatalogStore(SEED_PRODUCTS if app_settings.seed_catalog else ())

    app = FastAPI(
        title="Catalog API",
        description="Product catalog with filtering, sorting and pagination",
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.catalog_service = CatalogService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    setup_middleware(app)
    setup_exception_handlers(app)

    app.include_router(health_router, prefix=app_settings.api_prefix)
    app.include_router(products_router, prefix=app_settings.api_prefix)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
