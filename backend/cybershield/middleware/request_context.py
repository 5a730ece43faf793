"""
Request context middleware.

WHAT: Middleware that extracts request context (IP address, user agent, request ID)
and makes it available throughout the request lifecycle.

WHY: Contact records store the requester's IP and user agent, and log lines
need a request ID for correlation. This middleware captures:
- Client IP address (proxy headers only when trusted)
- User agent
- Request ID for correlation across logs
- Request timing

HOW: Uses Starlette's request state to store context, which can be accessed
by any handler or dependency during the request lifecycle. Uses contextvars
for async-safe access to request context from services.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Optional, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """
    Container for request-scoped context data.

    Fields:
    - request_id: Unique identifier for the request (for log correlation)
    - ip_address: Client IP
    - user_agent: Client's browser/application identifier
    - path: Request path
    - method: HTTP method (GET, POST, etc.)
    """

    request_id: str
    ip_address: str
    user_agent: Optional[str]
    path: str
    method: str


# Context variable for async-safe access to request context
# WHY: ContextVar ensures each async request gets its own isolated context,
# preventing data leaks between concurrent requests
_request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)


def get_request_context() -> Optional[RequestContext]:
    """
    Get the current request context.

    Returns:
        RequestContext if within a request, None otherwise
    """
    return _request_context.get()


def get_client_ip(request: Request, trust_proxy_headers: bool = False) -> str:
    """
    Extract the client IP address from a request.

    WHAT: Gets the client's IP, optionally honoring proxy headers.

    HOW: When trust_proxy_headers is set, checks headers in order of trust:
    1. X-Real-IP (set by some proxies like nginx)
    2. X-Forwarded-For (comma-separated list, first is original client)
    Otherwise, and as a fallback, uses request.client.host (direct
    connection IP).

    Args:
        request: The incoming request
        trust_proxy_headers: Whether X-Real-IP / X-Forwarded-For are honored

    Returns:
        Client IP address as string

    Security Note:
        These headers can be spoofed by clients if not behind a trusted proxy,
        which is why they are ignored unless explicitly trusted.
    """
    if trust_proxy_headers:
        x_real_ip = request.headers.get("X-Real-IP")
        if x_real_ip:
            return x_real_ip.strip()

        # Format: "client, proxy1, proxy2"
        x_forwarded_for = request.headers.get("X-Forwarded-For")
        if x_forwarded_for:
            first_ip = x_forwarded_for.split(",")[0].strip()
            if first_ip:
                return first_ip

    if request.client and request.client.host:
        return request.client.host

    # Final fallback (shouldn't happen in normal operation)
    return "unknown"


def get_user_agent(request: Request) -> Optional[str]:
    """
    Extract the User-Agent header from a request.

    Returns:
        User-Agent string or None if not present
    """
    return request.headers.get("User-Agent")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that captures and stores request context.

    WHAT: Extracts IP, user agent, and request ID from every request
    and makes them available to handlers and services.

    HOW: Uses Starlette's BaseHTTPMiddleware to wrap request processing.
    Stores context in both:
    - request.state (for access from request handlers)
    - ContextVar (for access from services without request object)

    Example:
        @router.post("/contact")
        async def submit(request: Request):
            ctx = request.state.context
            print(f"Request {ctx.request_id} from {ctx.ip_address}")
    """

    def __init__(self, app: ASGIApp, trust_proxy_headers: bool = False):
        super().__init__(app)
        self.trust_proxy_headers = trust_proxy_headers

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and add context.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with request ID header added
        """
        request_id = str(uuid.uuid4())

        context = RequestContext(
            request_id=request_id,
            ip_address=get_client_ip(request, self.trust_proxy_headers),
            user_agent=get_user_agent(request),
            path=request.url.path,
            method=request.method,
        )

        request.state.context = context
        token = _request_context.set(context)
        started = time.perf_counter()

        try:
            response = await call_next(request)

            # WHY: Helps clients correlate responses with their requests
            response.headers["X-Request-ID"] = request_id

            logger.debug(
                f"{context.method} {context.path} -> {response.status_code} "
                f"({(time.perf_counter() - started) * 1000:.1f} ms) [{request_id}]"
            )
            return response

        finally:
            # Reset context var to prevent leaks
            _request_context.reset(token)
