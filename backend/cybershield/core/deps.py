"""
FastAPI dependencies.

WHY: Route handlers receive the settings, store, and services through
Depends() instead of importing module globals. create_app() puts the
instances on app.state; these functions hand them out per request, and
tests can override them with app.dependency_overrides.
"""

from typing import Optional

from fastapi import Depends, Request

from cybershield.core.config import Settings
from cybershield.dao.contact_store import ContactStore
from cybershield.middleware.request_context import RequestContext, get_request_context
from cybershield.services.contact_service import ContactService


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_contact_store(request: Request) -> ContactStore:
    """The app's contact store."""
    return request.app.state.contact_store


def get_contact_service(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> ContactService:
    """
    Contact service bound to the app's store and notification service.

    Args:
        request: Current request (for app state)
        store: Contact store dependency

    Returns:
        ContactService ready to accept submissions
    """
    return ContactService(store, notifications=request.app.state.notifications)


def get_context(request: Request) -> Optional[RequestContext]:
    """
    Request context captured by RequestContextMiddleware.

    Falls back to the ContextVar when the handler runs outside the
    middleware-populated request state.
    """
    return getattr(request.state, "context", None) or get_request_context()
