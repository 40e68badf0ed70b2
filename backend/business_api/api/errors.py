"""
Exception handlers that render every error as ``{"error": message}``.

- BusinessApiError: status code carried by the exception class
- HTTPException (including unknown routes and 405s): its status and detail
- RequestValidationError (malformed JSON, non-integer path ids): 400
- anything else: 500 with a generic message

Stack traces are never returned to clients; server-side failures are
logged with their structured details.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from business_api.core.errors import BusinessApiError
from business_api.core.logging import get_logger

logger = get_logger("api.errors")


async def business_api_error_handler(request: Request, exc: BusinessApiError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "Request failed",
            path=request.url.path,
            method=request.method,
            error=exc.message,
            resource=exc.resource,
            **exc.details,
        )
    else:
        logger.info(
            "Request rejected",
            path=request.url.path,
            method=request.method,
            status_code=exc.status_code,
            error=exc.message,
            resource=exc.resource,
            **exc.details,
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    logger.info("Request validation failed", path=request.url.path, error=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(BusinessApiError, business_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
