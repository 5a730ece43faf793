"""
FastAPI exception handlers for custom exceptions.

WHY: Exception handlers convert our custom exceptions into properly
formatted JSON responses with correct HTTP status codes, ensuring
consistent error handling across the entire API.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from cybershield.core.exceptions import AppException


logger = logging.getLogger(__name__)


def _is_development(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings is not None and settings.is_development)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle custom AppException and its subclasses.

    WHY: This handler catches all custom exceptions and converts them to
    JSON responses with proper HTTP status codes. Server-side failures are
    logged with their internal detail; the detail reaches the client only
    in development mode.

    Args:
        request: The FastAPI request object
        exc: The custom exception instance

    Returns:
        JSONResponse with error details
    """
    if exc.status_code >= 500:
        logger.error(
            f"{exc.__class__.__name__} on {request.method} {request.url.path}: "
            f"{exc.detail or exc.message}"
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_detail=_is_development(request)),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    WHY: A body that is not a JSON object, or a field with the wrong type,
    is rejected by FastAPI before the route runs. Answer with the same 400
    shape the contact form already understands.

    Args:
        request: The FastAPI request object
        exc: The Pydantic validation error

    Returns:
        JSONResponse with validation error details
    """
    errors = []
    for error in exc.errors():
        errors.append(
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
        )

    return JSONResponse(
        status_code=400,
        content={
            "error": "Request validation failed",
            "code": "ValidationError",
            "status_code": 400,
            "details": {"errors": errors},
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Handle Starlette HTTP exceptions.

    WHY: Some HTTP exceptions (404, 405) are raised by Starlette/FastAPI
    before reaching our routes. This handler ensures they match our error format.

    Args:
        request: The FastAPI request object
        exc: The HTTP exception

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "code": "HTTPException",
            "status_code": exc.status_code,
            "details": None,
        },
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler for unexpected exceptions.

    WHY: This is a safety net for any exceptions that slip through a route.
    The full traceback is logged; the client gets a generic error, plus the
    exception text when running in development.

    Args:
        request: The FastAPI request object
        exc: The unexpected exception

    Returns:
        JSONResponse with generic error message
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)

    content = {
        "error": "Something went wrong!",
        "code": "InternalServerError",
        "status_code": 500,
        "details": None,
    }
    if _is_development(request):
        content["message"] = str(exc)

    return JSONResponse(status_code=500, content=content)
