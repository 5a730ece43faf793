"""
Main FastAPI application.

WHY: This is the entry point for the application. It configures middleware,
routes, exception handlers, and other application-level concerns.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from cybershield.core.config import Settings, get_settings
from cybershield.core.exceptions import AppException
from cybershield.core.exception_handlers import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    generic_exception_handler,
)
from cybershield.core.logging import configure_logging
from cybershield.core.process import install_loop_handler, install_process_handlers
from cybershield.dao.contact_store import ContactStore
from cybershield.middleware import RequestContextMiddleware
from cybershield.api import admin, catalog, contact, frontend, health
from cybershield.services.notification_service import NotificationService


logger = logging.getLogger(__name__)


API_ROUTES = [
    ("GET", "/health", "Health check"),
    ("GET", "/services", "List all services"),
    ("POST", "/contact", "Submit contact form"),
    ("GET", "/admin/contacts", "View submissions (demo)"),
]


def startup_banner(settings: Settings) -> str:
    """Human-readable summary of where the server listens and what it serves."""
    api_base = f"{settings.local_url}{settings.API_PREFIX}"
    lines = [
        "CyberShield Server Started!",
        f"  Local:          {settings.local_url}",
        f"  API Base:       {api_base}",
        f"  Serving from:   {settings.FRONTEND_DIR}",
        f"  Data directory: {settings.DATA_DIR}",
        f"  Server running in {settings.ENVIRONMENT} mode",
        "Available API Routes:",
    ]
    for method, path, description in API_ROUTES:
        lines.append(f"  {method:<5}{settings.API_PREFIX + path:<22}- {description}")
    return "\n".join(lines)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    WHY: Factory pattern allows testing with different configurations
    (for example a temporary data directory per test). The settings object
    is kept on app.state and handed to handlers through dependencies.

    Args:
        settings: Configuration; built from the environment when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="CyberShield security consulting API",
        version=settings.VERSION,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=None,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
    )

    # State
    # WHY: One store per app. Tests build apps over their own tmp directory.
    app.state.settings = settings
    app.state.contact_store = ContactStore(
        settings.contacts_file,
        serialize_writes=settings.CONTACT_STORE_SERIALIZE_WRITES,
    )
    app.state.notifications = NotificationService()

    # Register exception handlers
    # WHY: Exception handlers ensure consistent error responses across the API
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Configure Request Context Middleware
    # WHY: Captures client IP, user agent, and request ID; contact records
    # store the first two.
    app.add_middleware(
        RequestContextMiddleware,
        trust_proxy_headers=settings.TRUST_PROXY_HEADERS,
    )

    # Configure CORS
    # WHY: The site's frontend may be hosted on a different origin
    # (CDN, preview deployments), so every origin is allowed by default.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """
        Application startup event handler.

        WHY: Creates the data directory and empty contacts file before the
        first request, and makes unhandled event loop errors fatal.
        """
        install_loop_handler()
        await app.state.contact_store.ensure_initialized()
        logger.info(startup_banner(settings))

    # Register API routers
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(catalog.router, prefix=settings.API_PREFIX)
    app.include_router(contact.router, prefix=settings.API_PREFIX)
    app.include_router(admin.router, prefix=settings.API_PREFIX)

    # WHY: Catch-all must be registered after every other route.
    app.include_router(frontend.router)

    return app


def run() -> None:
    """
    Start the server with settings from the environment.

    Used by `python -m cybershield` and the `cybershield` console script.
    """
    import uvicorn

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    install_process_handlers()

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
