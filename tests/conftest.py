"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, store, client and live server fixtures.

==============================================================================
"""

import socket
from contextlib import ExitStack
from typing import Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient

from coffeeshop.application import Application
from coffeeshop.catalog import INVENTORY, MemoryStore, Product
from coffeeshop.config import Settings
from coffeeshop.server import CatalogServer


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, latency="0s", shutdown_timeout=5.0)


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def inventory() -> Dict[str, Product]:
    """The built-in eight product inventory."""
    return dict(INVENTORY)


@pytest.fixture
def store(inventory: Dict[str, Product]) -> MemoryStore:
    """Memory store seeded with the built-in inventory."""
    return MemoryStore(inventory)


@pytest.fixture
def two_coffees_store() -> MemoryStore:
    """Memory store with two untyped coffees."""
    return MemoryStore({
        "1": Product(id="1", name="Coffee", brand="Segafredo"),
        "2": Product(id="2", name="Coffee", brand="illy"),
    })


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def make_client(settings: Settings) -> Generator[Callable[..., TestClient], None, None]:
    """Factory building an in-process client for any store."""
    with ExitStack() as stack:

        def factory(store, **options) -> TestClient:
            app = Application(store, settings=settings, **options).app
            return stack.enter_context(TestClient(app))

        yield factory


@pytest.fixture
def client(make_client, store: MemoryStore) -> TestClient:
    """In-process client serving the built-in inventory without delay."""
    return make_client(store)


# ============================================================================
# LIVE SERVER FIXTURES
# ============================================================================

def free_address() -> str:
    """Reserve a free loopback port and release it for the server."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return f"127.0.0.1:{sock.getsockname()[1]}"


@pytest.fixture
def live_server(settings: Settings) -> Generator[Callable[..., CatalogServer], None, None]:
    """Factory starting a real server; every server is shut down after the test."""
    servers = []

    def factory(store, latency: str = "100ms") -> CatalogServer:
        server = CatalogServer(free_address(), store, latency=latency, settings=settings)
        server.start()
        servers.append(server)
        return server

    yield factory

    for server in servers:
        server.shutdown(timeout=5.0)
