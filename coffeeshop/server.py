"""
==============================================================================
Catalog HTTP Server
==============================================================================

Owns the uvicorn server lifecycle for a catalog application.

Usage:
------
    server = CatalogServer("127.0.0.1:8080", MemoryStore(INVENTORY), latency="2s")

    # Foreground, until shutdown() is called from elsewhere or SIGINT/SIGTERM
    server.serve()

    # Background thread, returns once the listener is bound
    server.start()
    ...
    server.shutdown(timeout=5.0)

==============================================================================
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Optional, Tuple

import uvicorn

from coffeeshop.application import Application
from coffeeshop.catalog.store import CatalogStore
from coffeeshop.config import Settings, get_settings
from coffeeshop.core.exceptions import ConfigurationError
from coffeeshop.utils.durations import parse_duration


# Module logger
logger = logging.getLogger(__name__)

# Hosts that bind every interface; clients reach them through loopback.
_WILDCARD_HOSTS = {"", "0.0.0.0", "::"}


def parse_address(address: str) -> Tuple[str, int]:
    """
    Split a listen address into host and port.

    Accepts "host:port", ":port" (all interfaces) and "[v6addr]:port".

    Raises:
        ConfigurationError: If the address is malformed
    """
    host, sep, port_text = address.rpartition(":")
    if not sep:
        raise ConfigurationError(f"invalid address {address!r}: missing port")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]

    try:
        port = int(port_text)
    except ValueError:
        raise ConfigurationError(f"invalid address {address!r}: bad port {port_text!r}") from None

    if not 0 <= port <= 65535:
        raise ConfigurationError(f"invalid address {address!r}: port out of range")

    return host or "0.0.0.0", port


class CatalogServer:
    """
    HTTP server for a catalog store.

    Attributes:
        address: Listen address as given
        url: Base URL clients use, ending in "/"
        latency: Artificial per-request delay in seconds
        keep_alive_timeout: Seconds an idle connection is kept open
        store: Store being served
        app: The FastAPI application
    """

    def __init__(
        self,
        address: str,
        store: CatalogStore,
        latency: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the server without binding.

        Args:
            address: Listen address ("host:port" or ":port")
            store: Catalog store to serve
            latency: Delay duration such as "2s"; settings latency when None
            settings: Settings override (global settings when None)

        Raises:
            ConfigurationError: If the address or latency is invalid
        """
        self._settings = settings or get_settings()

        self.address = address
        self.host, self.port = parse_address(address)
        self.latency = parse_duration(self._settings.latency if latency is None else latency)
        self.keep_alive_timeout = self._settings.keep_alive_timeout
        self.store = store

        client_host = "127.0.0.1" if self.host in _WILDCARD_HOSTS else self.host
        if ":" in client_host:
            client_host = f"[{client_host}]"
        self.url = f"http://{client_host}:{self.port}/"

        self.app = Application(store, latency=self.latency, settings=self._settings).app

        self._server = uvicorn.Server(
            uvicorn.Config(
                self.app,
                host=self.host,
                port=self.port,
                lifespan="on",
                log_config=None,
                timeout_graceful_shutdown=self._settings.shutdown_timeout,
                timeout_keep_alive=self.keep_alive_timeout,
            )
        )
        self._thread: Optional[threading.Thread] = None
        self._stopped = threading.Event()

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def serve(self) -> None:
        """Bind the listener and serve until shutdown() is called."""
        logger.info(f"📍 Listening on {self.url} (latency={self.latency}s)")
        self._stopped.clear()
        try:
            self._server.run()
        finally:
            self._stopped.set()
            logger.info("✅ Server stopped")

    def start(self, ready_timeout: float = 10.0) -> None:
        """
        Serve in a background thread.

        Returns once the listener is bound.

        Raises:
            RuntimeError: If the server is already running or fails to start
        """
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("server already running")

        self._thread = threading.Thread(target=self.serve, name="catalog-server", daemon=True)
        self._thread.start()

        deadline = time.monotonic() + ready_timeout
        while not self._server.started:
            if not self._thread.is_alive():
                raise RuntimeError(f"server failed to start on {self.address}")
            if time.monotonic() > deadline:
                self.shutdown(timeout=0.0)
                raise RuntimeError(f"server did not start within {ready_timeout}s")
            time.sleep(0.01)

    def shutdown(self, timeout: Optional[float] = None) -> None:
        """
        Stop accepting connections and drain in-flight requests.

        Args:
            timeout: Seconds to wait for in-flight requests; unbounded when None.
                Requests still running after it are cancelled.
        """
        logger.info("🛑 Shutting down...")
        self._server.config.timeout_graceful_shutdown = timeout
        self._server.should_exit = True

        if self._thread is not None:
            self._thread.join()
            self._thread = None
        elif self._server.started:
            self._stopped.wait()

    @property
    def running(self) -> bool:
        """Whether the listener is bound and serving."""
        return self._server.started and not self._stopped.is_set()
