"""
Secure HTTP headers middleware.

Adds security-related headers to every response that passes through
the middleware stack. Unhandled-exception 500s are built outside it, so
the error handlers apply the same header set via build_secure_headers.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


def build_secure_headers(content_security_policy: str) -> dict[str, str]:
    """Return the header set applied to every response."""
    return {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Content-Security-Policy": content_security_policy,
        "X-XSS-Protection": "1; mode=block",
    }


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Sets the configured security headers, overriding any set by a route."""

    def __init__(self, app: ASGIApp, content_security_policy: str = "default-src 'self'") -> None:
        super().__init__(app)
        self._headers = build_secure_headers(content_security_policy)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(self._headers)
        return response
