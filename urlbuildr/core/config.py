"""
Application configuration using Pydantic Settings.

All configuration is read from environment variables (12-factor app),
with defaults that produce bare, host-less URLs until told otherwise.
"""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Central application configuration."""

    # URL defaults (applied to structured initializers)
    url_prefix: str = Field(
        default="",
        description="Scheme literal placed before the host, e.g. 'https://'",
    )
    url_host: str = Field(
        default="",
        description="Host used when an initializer does not name one",
    )
    url_port: Optional[int] = Field(
        default=None,
        description="Port used when an initializer does not name one",
    )
    url_path_prefix: str = Field(
        default="",
        description="First path component, placed right after host and port",
    )

    # Rendering
    encode_queries: bool = Field(
        default=False,
        description="Percent-encode query keys and values in the HTTP API",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Application log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # API Server
    api_host: str = Field(default="0.0.0.0", description="API bind host")
    api_port: int = Field(default=8000, description="API bind port")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this throughout the app
settings = Settings()
