"""Infrastructure module: settings and logging setup."""

from catalog_api.infrastructure.config import Settings, settings
from catalog_api.infrastructure.logging import configure_logging

__all__ = ["Settings", "configure_logging", "settings"]
