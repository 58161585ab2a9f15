"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException hierarchy, handlers and factory functions
- dependencies: FastAPI dependency providers
- middleware: Request ID, security headers and access logging

Usage:
------
    from app.core import exceptions
    raise exceptions.catalog_not_loaded()

==============================================================================
"""

from .exceptions import (
    AppException,
    DuplicateProductError,
    InvalidProductIDError,
    InvalidRequestTypeError,
    ProductNotFoundError,
    ProductsNotFoundError,
    UnregisteredHandlerError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "DuplicateProductError",
    "InvalidProductIDError",
    "InvalidRequestTypeError",
    "ProductNotFoundError",
    "ProductsNotFoundError",
    "UnregisteredHandlerError",
    "register_exception_handlers",
]
