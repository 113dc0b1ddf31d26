"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, stores)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database schema creation

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from projectstore.core.config import settings
from projectstore.infrastructure.database import create_schema, get_engine
from projectstore.interfaces.health import router as health_router
from projectstore.interfaces.stores.router import router as stores_router
from projectstore.shared.errors.handlers import register_error_handlers
from projectstore.shared.logging import configure_logging
from projectstore.shared.security.headers import SecurityHeadersMiddleware
from projectstore.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the database schema on startup."""
    if settings.create_tables:
        create_schema(get_engine())
    logger.info("%s %s started.", settings.project_name, settings.version)

    yield

    get_engine().dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(
        SecurityHeadersMiddleware,
        content_security_policy=settings.content_security_policy,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(stores_router, prefix=settings.api_prefix)

    return app


app = create_app()
