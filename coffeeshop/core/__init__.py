"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException, ConfigurationError and error factory functions
- middleware: Delay, timeout and default header ASGI middleware
- dependencies: FastAPI dependency injection functions

Usage:
------
    from coffeeshop.core import exceptions
    raise exceptions.product_not_found("42")

==============================================================================
"""

from .exceptions import (
    AppException,
    ConfigurationError,
    register_exception_handlers,
)
from .middleware import DefaultHeaderMiddleware, DelayMiddleware, TimeoutMiddleware

__all__ = [
    # Exceptions
    "AppException",
    "ConfigurationError",
    "register_exception_handlers",
    # Middleware
    "DefaultHeaderMiddleware",
    "DelayMiddleware",
    "TimeoutMiddleware",
]
