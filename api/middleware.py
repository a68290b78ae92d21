"""
Global middleware and exception handlers.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import ServiceError

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI) -> None:
    """
    Attach any app-level middleware.

    Must run before CORS is added so the CORS layer wraps these, including
    the 500 responses produced for unhandled errors.
    """

    @app.middleware("http")
    async def unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map errors to ``{"error": ...}`` JSON bodies.

    Only the fixed messages from ``core.errors`` reach the client; anything
    else falls through to ``unhandled_errors`` and is reported as a bare 500.
    """

    @app.exception_handler(ServiceError)
    async def service_error(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        fields = sorted({
            str(err["loc"][-1])
            for err in exc.errors()
            if err.get("loc")
        })
        logger.debug("%s %s rejected, invalid fields: %s", request.method, request.url.path, fields)
        return JSONResponse(
            status_code=400,
            content={"error": "Missing or invalid fields", "fields": fields},
        )
