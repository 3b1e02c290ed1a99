"""
==============================================================================
Application Factory
==============================================================================

Builds the FastAPI application serving a catalog store.

The store is injected, never global: each application instance serves
exactly the store it was built with.

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from coffeeshop.api import api_router
from coffeeshop.catalog.store import CatalogStore
from coffeeshop.config import Settings, get_settings
from coffeeshop.core.exceptions import ConfigurationError, register_exception_handlers
from coffeeshop.core.middleware import (
    DefaultHeaderMiddleware,
    DelayMiddleware,
    TimeoutMiddleware,
)


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class Application:
    """
    FastAPI application factory.

    Handles:
    - Startup and shutdown logging
    - Middleware configuration (timeout, content type, delay)
    - Router registration
    - Exception handler setup

    Example:
        >>> app = Application(MemoryStore(INVENTORY), latency=0.1).app
    """

    def __init__(
        self,
        store: CatalogStore,
        latency: Optional[float] = None,
        request_timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the application.

        Args:
            store: Catalog store to serve
            latency: Delay in seconds before each request (settings when None)
            request_timeout: Per-request timeout in seconds (settings when None)
            settings: Settings override (global settings when None)

        Raises:
            ConfigurationError: If latency is negative or request_timeout is not positive
        """
        self._settings = settings or get_settings()
        self._store = store
        self._latency = self._settings.latency_seconds if latency is None else latency
        self._request_timeout = (
            self._settings.request_timeout if request_timeout is None else request_timeout
        )

        if self._latency < 0:
            raise ConfigurationError(f"latency must not be negative, got {self._latency}")
        if self._request_timeout <= 0:
            raise ConfigurationError(f"request timeout must be positive, got {self._request_timeout}")

        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Read-only coffee and tea product catalog",
            lifespan=self._lifespan,
            docs_url=None,
            redoc_url=None,
            openapi_url=None,
        )
        app.state.store = self._store

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            f"🚀 Starting {self._settings.app_name} "
            f"(latency={self._latency}s, timeout={self._request_timeout}s)"
        )
        yield
        logger.info("🛑 Application stopped")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure middleware; the last one added runs first."""
        app.add_middleware(DelayMiddleware, delay=self._latency)
        app.add_middleware(DefaultHeaderMiddleware, name="content-type", value=JSON_CONTENT_TYPE)
        app.add_middleware(TimeoutMiddleware, timeout=self._request_timeout)

    @property
    def latency(self) -> float:
        """Configured delay in seconds."""
        return self._latency

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app
