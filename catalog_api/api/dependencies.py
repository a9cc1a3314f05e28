"""FastAPI dependencies resolving per-application state."""

from typing import Annotated

from fastapi import Depends, Request

from catalog_api.catalog.service import CatalogService
from catalog_api.infrastructure.config import Settings


def get_catalog_service(request: Request) -> CatalogService:
    """Get the catalog service bound to this application."""
    return request.app.state.catalog_service


def get_settings(request: Request) -> Settings:
    """Get the settings bound to this application."""
    return request.app.state.settings


CatalogDep = Annotated[CatalogService, Depends(get_catalog_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
