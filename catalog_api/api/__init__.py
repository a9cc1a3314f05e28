"""API layer module.

Contains FastAPI routers, request/response schemas, middleware and
exception handlers.
"""

from catalog_api.api.health import router as health_router
from catalog_api.api.products import router as products_router

__all__ = [
    "health_router",
    "products_router",
]
