"""
Application Exception Handling

AppException for errors that end up as HTTP responses, ConfigurationError for
invalid startup configuration, with FastAPI integration.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse


# Module logger
logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """
    Raised when the service is constructed with invalid configuration.

    Covers malformed duration strings, listen addresses and seed catalogs.
    Raised synchronously by constructors so the process fails to start.
    """


class AppException(Exception):
    """
    Unified application exception for request-level errors.

    The registered handler turns it into a plain-text response carrying
    the message and status code.

    Usage:
        raise AppException("product not found", "PRODUCT_NOT_FOUND", 404)

    Error Codes:
        - PRODUCT_NOT_FOUND (404)
        - SERIALIZATION_FAILURE (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message, used as response body
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context, logged only (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


async def app_exception_handler(request: Request, exc: AppException) -> PlainTextResponse:
    """
    FastAPI exception handler for AppException.

    Server errors are logged at error level, client errors at debug level.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code} {exc.details}")
    else:
        logger.debug(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code} {exc.details}")

    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(product_id: Optional[str] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id else {}
    return AppException("product not found", "PRODUCT_NOT_FOUND", 404, details)


def serialization_failure(reason: str) -> AppException:
    """Create response serialization failure exception."""
    return AppException("internal error", "SERIALIZATION_FAILURE", 500, {"reason": reason})
