"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the {"msg": ...} envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from projectstore.core.config import settings
from projectstore.domain.stores.errors import (
    ModelNotFoundError,
    StoreDomainError,
    StoreNameCannotBeEmptyError,
    StoreNotFoundError,
)
from projectstore.shared.security.headers import build_secure_headers

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

MSG_NAME_EMPTY = "name cannot be empty"
MSG_STORE_NOT_FOUND = "store not found"
MSG_INTERNAL = "internal server error"


def _error_response(
    status_code: int, msg: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"msg": msg}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StoreNameCannotBeEmptyError)
    async def handle_store_name_empty(
        _request: Request, exc: StoreNameCannotBeEmptyError
    ) -> JSONResponse:
        """Handle creation requests without a store name."""
        logger.warning("Store name empty")
        return _error_response(HTTP_400, MSG_NAME_EMPTY)

    @app.exception_handler(ModelNotFoundError)
    async def handle_model_not_found(
        _request: Request, exc: ModelNotFoundError
    ) -> JSONResponse:
        """Handle lookups of unknown ids."""
        logger.warning("%s not found: %d", exc.model, exc.model_id)
        return _error_response(HTTP_400, MSG_STORE_NOT_FOUND)

    @app.exception_handler(StoreNotFoundError)
    async def handle_store_not_found(
        _request: Request, exc: StoreNotFoundError
    ) -> JSONResponse:
        """Handle operations on unknown stores."""
        logger.warning("Store not found: %d", exc.store_id)
        return _error_response(HTTP_400, MSG_STORE_NOT_FOUND)

    @app.exception_handler(StoreDomainError)
    async def handle_store_domain(
        _request: Request, exc: StoreDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled stores domain errors."""
        logger.error("Unhandled stores domain error: %s", exc.message)
        return _error_response(HTTP_500, MSG_INTERNAL)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals.

        Runs in the outermost server-error middleware, past
        SecurityHeadersMiddleware, so it sets the security headers itself.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(
            HTTP_500,
            MSG_INTERNAL,
            headers=build_secure_headers(settings.content_security_policy),
        )
