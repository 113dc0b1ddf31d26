"""
Dependency injection for the stores bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the Store Service via constructor injection.
Tests replace get_store_service through app.dependency_overrides.
"""

from projectstore.application.stores.service import StoreService
from projectstore.infrastructure.database import get_engine
from projectstore.infrastructure.stores.store_repository import (
    SqlAlchemyStoreRepository,
)


def get_store_service() -> StoreService:
    """Build StoreService with its infrastructure dependencies."""
    return StoreService(
        store_repo=SqlAlchemyStoreRepository(engine=get_engine()),
    )
