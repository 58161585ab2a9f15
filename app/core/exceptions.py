"""
Application Exception Handling

AppException is the root of every application error. Catalog and dispatch
errors are subclasses so callers can tell them apart by type, and the FastAPI
handler renders all of them with one consistent JSON shape.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


# Module logger
logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Invalid price range", "INVALID_PRICE_RANGE", 400)

    Error Codes:
        Catalog:
            - INVALID_PRODUCT_ID (400)
            - PRODUCT_NOT_FOUND (404)
            - PRODUCTS_NOT_FOUND (404)
            - DUPLICATE_PRODUCT_ID (500)
            - CATALOG_NOT_LOADED (503)

        Dispatch:
            - INVALID_REQUEST_TYPE (500)
            - HANDLER_NOT_REGISTERED (500)

        Request parameters:
            - INVALID_MIN_PRICE, INVALID_MAX_PRICE, INVALID_PRICE_RANGE (400)
            - MISSING_PRODUCT_IDS, INSUFFICIENT_PRODUCTS, TOO_MANY_PRODUCTS (400)
            - MISSING_SEARCH_QUERY, INVALID_SEARCH_QUERY (400)

        General:
            - VALIDATION_ERROR (422)
            - INTERNAL_ERROR (500)
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
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CATALOG ERRORS
# ============================================

class InvalidProductIDError(AppException):
    """Raised when an empty or malformed product ID is looked up."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(
            f"invalid product ID: '{product_id}'",
            "INVALID_PRODUCT_ID",
            400,
            {"hint": "Product ID must be a valid non-empty string"}
        )


class ProductNotFoundError(AppException):
    """Raised when no product carries the requested ID."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(
            f"product with ID '{product_id}' not found",
            "PRODUCT_NOT_FOUND",
            404,
            {"product_id": product_id}
        )


class ProductsNotFoundError(AppException):
    """
    Raised when a multi-ID lookup leaves one or more IDs unresolved.

    The products that did resolve travel with the error, so a caller that
    catches it still has the partial result.

    Attributes:
        products: Products that were found, in request order
        missing_ids: IDs with no matching product, in request order
    """

    def __init__(self, missing_ids: Sequence[str], products: Sequence[Any] = ()):
        self.missing_ids: List[str] = list(missing_ids)
        self.products: List[Any] = list(products)
        super().__init__(
            f"products not found: {self.missing_ids}",
            "PRODUCTS_NOT_FOUND",
            404,
            {
                "missing_ids": self.missing_ids,
                "found_ids": [product.id for product in self.products],
            }
        )


class DuplicateProductError(AppException):
    """Raised when a catalog is built from records sharing an ID."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(
            f"duplicate product ID: '{product_id}'",
            "DUPLICATE_PRODUCT_ID",
            500,
            {"product_id": product_id}
        )


# ============================================
# DISPATCH ERRORS
# ============================================

class InvalidRequestTypeError(AppException):
    """Raised when a handler receives a query of the wrong type."""

    def __init__(self, handler_name: str, query_type: str):
        self.handler_name = handler_name
        self.query_type = query_type
        super().__init__(
            f"invalid request type for {handler_name}: {query_type}",
            "INVALID_REQUEST_TYPE",
            500,
            {"handler": handler_name, "request_type": query_type}
        )


class UnregisteredHandlerError(AppException):
    """Raised when the mediator has no handler for a query type."""

    def __init__(self, query_type: str):
        self.query_type = query_type
        super().__init__(
            f"no handler registered for request type: {query_type}",
            "HANDLER_NOT_REGISTERED",
            500,
            {"request_type": query_type}
        )


# ============================================
# FASTAPI INTEGRATION
# ============================================

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to consistent JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI parameter validation failures in the AppException shape."""
    error = AppException(
        "Request validation failed",
        "VALIDATION_ERROR",
        422,
        {"errors": [
            {"loc": list(err.get("loc", ())), "message": err.get("msg", "")}
            for err in exc.errors()
        ]}
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any uncaught exception as a generic 500 without leaking its text."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    error = internal_error()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def bad_request(code: str, message: str, hint: Optional[str] = None) -> AppException:
    """Create a 400 exception for an invalid request parameter."""
    details = {"hint": hint} if hint else {}
    return AppException(message, code, 400, details)


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        503
    )


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
