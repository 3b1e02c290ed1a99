"""
==============================================================================
HTTP Middleware Module
==============================================================================

ASGI middleware applied to every request.

Pipeline (outermost first):
--------------------------
    TimeoutMiddleware       -> aborts handling after request_timeout (504)
    DefaultHeaderMiddleware -> Content-Type: application/json; charset=utf-8
    DelayMiddleware         -> fixed artificial latency
    Router

Register with FastAPI in reverse order, since the last middleware added
becomes the outermost:

    app.add_middleware(DelayMiddleware, delay=0.1)
    app.add_middleware(DefaultHeaderMiddleware, name="content-type", value="...")
    app.add_middleware(TimeoutMiddleware, timeout=120.0)

==============================================================================
"""

from __future__ import annotations

import asyncio
import logging

from starlette.datastructures import MutableHeaders
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send


# Module logger
logger = logging.getLogger(__name__)


class DelayMiddleware:
    """
    Stall every HTTP request by a fixed delay before it reaches the router.

    The delay is an asyncio sleep, so concurrent requests are delayed
    independently of each other.
    """

    def __init__(self, app: ASGIApp, delay: float) -> None:
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self.app = app
        self.delay = delay

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and self.delay > 0:
            await asyncio.sleep(self.delay)
        await self.app(scope, receive, send)


class DefaultHeaderMiddleware:
    """Add a response header unless the response already set it."""

    def __init__(self, app: ASGIApp, name: str, value: str) -> None:
        self.app = app
        self.name = name.lower()
        self.value = value

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_header(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                if self.name not in headers:
                    headers[self.name] = self.value
            await send(message)

        await self.app(scope, receive, send_with_header)


class TimeoutMiddleware:
    """
    Bound the handling of each HTTP request.

    When the timeout expires the downstream app is cancelled and, if no
    response has started yet, a 504 Gateway Timeout is sent instead.
    """

    def __init__(self, app: ASGIApp, timeout: float) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_tracking), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"⏱️ {scope.get('method')} {scope.get('path')} timed out after {self.timeout}s")
            if response_started:
                raise
            response = PlainTextResponse("request timed out", status_code=504)
            await response(scope, receive, send)
