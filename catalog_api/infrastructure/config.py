"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    app_name: str = "catalog-api"
    api_version: str = "0.1.0"
    api_prefix: str = "/api/v1"
    environment: str = "development"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS, comma-separated origins
    cors_origins: str = "*"

    # Catalog
    seed_catalog: bool = True
    product_cache_max_age: int = 300

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse ``cors_origins`` into a list."""
        origins = [o.strip().rstrip("/") for o in self.cors_origins.split(",")]
        return [o for o in origins if o] or ["*"]


settings = Settings()
