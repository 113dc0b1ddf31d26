"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit. Routes opt in with the
default_rate_limit decorator, which needs a `request: Request` parameter
on the endpoint.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from projectstore.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)

default_rate_limit = limiter.limit(settings.rate_limit_default)


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error envelope.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    return JSONResponse(status_code=429, content={"msg": "rate limit exceeded"})
