"""
==============================================================================
HTTP Middleware Module
==============================================================================

Cross-cutting HTTP behaviour applied to every route:

- Request ID: reuse the caller's X-Request-ID or generate one, and echo it
- Security headers: standard hardening headers on every response
- Access log: one line per request with status and latency
- Recovery: uncaught errors become a 500 INTERNAL_ERROR JSON envelope

==============================================================================
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.exceptions import internal_error


# Module logger
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def register_middleware(app: FastAPI) -> None:
    """
    Attach request-id, security-header and access-log middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"Unhandled error on {request.method} {request.url.path} [{request_id}]"
            )
            error = internal_error()
            response = JSONResponse(status_code=error.status_code, content=error.to_dict())
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)

        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{elapsed_ms:.1f}ms [{request_id}]"
        )
        return response
