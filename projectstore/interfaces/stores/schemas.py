"""
Pydantic schemas for store API request/response validation.

These schemas define the API contract.
No business logic belongs here: emptiness of the name is
checked by the Store Service so that it maps to a domain error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CreateStoreRequest(BaseModel):
    """Request schema for store creation.

    Attributes:
        name: Display name of the store. Missing and null both reach the
            service as None.
    """

    name: Optional[str] = Field(default=None, description="Display name of the store")


class StoreResponse(BaseModel):
    """Response schema for a single store."""

    id: int
    name: str


class MessageResponse(BaseModel):
    """Error envelope returned for client and server errors."""

    msg: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
