"""
Middleware package.

WHY: Middleware provides cross-cutting concerns that apply to all requests.
"""

from cybershield.middleware.request_context import (
    RequestContextMiddleware,
    get_request_context,
    get_client_ip,
    get_user_agent,
    RequestContext,
)

__all__ = [
    # Request context
    "RequestContextMiddleware",
    "get_request_context",
    "get_client_ip",
    "get_user_agent",
    "RequestContext",
]
