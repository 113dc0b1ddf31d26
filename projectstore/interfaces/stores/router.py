"""
FastAPI router for the stores bounded context.

All routes delegate to the Store Service. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request, Response

from projectstore.application.stores.service import StoreService
from projectstore.interfaces.stores.dependencies import get_store_service
from projectstore.interfaces.stores.schemas import (
    CreateStoreRequest,
    MessageResponse,
    StoreResponse,
)
from projectstore.shared.security.rate_limiting import default_rate_limit

router = APIRouter(prefix="/stores", tags=["stores"])


@router.post(
    "",
    status_code=200,
    response_model=StoreResponse,
    responses={400: {"model": MessageResponse}, 429: {"model": MessageResponse}},
    summary="Create a store",
)
@default_rate_limit
def create_store(
    request: Request,
    body: CreateStoreRequest,
    service: StoreService = Depends(get_store_service),
) -> StoreResponse:
    """Create a store and return it with its assigned id."""
    store = service.create(body.name)
    return StoreResponse(id=store.id, name=store.name)


@router.get(
    "/{store_id}",
    response_model=StoreResponse,
    responses={400: {"model": MessageResponse}, 429: {"model": MessageResponse}},
    summary="Get a store",
)
@default_rate_limit
def get_store(
    request: Request,
    store_id: int,
    service: StoreService = Depends(get_store_service),
) -> StoreResponse:
    """Return a single store by id."""
    store = service.get_store(store_id)
    return StoreResponse(id=store.id, name=store.name)


@router.delete(
    "/{store_id}",
    status_code=204,
    response_class=Response,
    responses={400: {"model": MessageResponse}, 429: {"model": MessageResponse}},
    summary="Delete a store",
)
@default_rate_limit
def delete_store(
    request: Request,
    store_id: int,
    service: StoreService = Depends(get_store_service),
) -> Response:
    """Delete a store by id."""
    service.delete_store_by_id(store_id)
    return Response(status_code=204)
