"""
Health check router.

Liveness probe for the Store API. It does not touch the database, so a
failing store backend still reports "ok" here.
"""

from fastapi import APIRouter, Request

from projectstore.core.config import settings
from projectstore.interfaces.stores.schemas import HealthResponse
from projectstore.shared.security.rate_limiting import default_rate_limit

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
@default_rate_limit
def health_check(request: Request) -> HealthResponse:
    """Report that the process is serving and which version it runs."""
    return HealthResponse(status="ok", version=settings.version)
