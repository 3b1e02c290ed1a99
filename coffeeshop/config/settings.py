"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

Features:
---------
- Environment variable loading with type validation (COFFEESHOP_ prefix)
- .env file support for local development
- Duration validation for the artificial request latency
- Cached singleton access through get_settings()

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coffeeshop.utils.durations import parse_duration


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        latency: Artificial delay added to every request (e.g. "100ms", "2s")
        request_timeout: Upper bound on handling a single request, in seconds
        shutdown_timeout: Upper bound on draining in-flight requests, in seconds
        keep_alive_timeout: Idle keep-alive connection lifetime, in seconds
        products_file: Optional path to a JSON product catalog

    Example:
        >>> settings = Settings(latency="2s")
        >>> settings.latency_seconds
        2.0
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="COFFEESHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Coffee Shop Catalog",
        description="Display name for the application"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Server port number"
    )

    latency: str = Field(
        default="100ms",
        description="Artificial delay added before every request is handled"
    )

    request_timeout: float = Field(
        default=120.0,
        gt=0,
        description="Per-request timeout in seconds"
    )

    shutdown_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Graceful shutdown timeout in seconds"
    )

    keep_alive_timeout: int = Field(
        default=30,
        ge=1,
        description="Seconds an idle keep-alive connection stays open"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    products_file: Optional[str] = Field(
        default=None,
        description="Path to product catalog JSON; built-in inventory when unset"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("latency")
    @classmethod
    def validate_latency(cls, value: str) -> str:
        """
        Validate the latency is a parseable duration.

        Raises:
            ValueError: If the duration string is malformed
        """
        parse_duration(value)
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def latency_seconds(self) -> float:
        """Get the configured latency in seconds."""
        return parse_duration(self.latency)

    @property
    def address(self) -> str:
        """Get the listen address as host:port."""
        return f"{self.host}:{self.port}"

    @property
    def products_path(self) -> Optional[Path]:
        """Get products file as Path object, if configured."""
        if not self.products_file:
            return None
        return Path(self.products_file)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"address={self.address!r}, "
            f"latency={self.latency!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Cached Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
