"""
Store Service: validation and orchestration for Store entities.

Input: store names and ids from the interface layer.
Output: Store entities.
Side effects: Persists and deletes stores through the StoreRepository port.
Failure cases: StoreNameCannotBeEmptyError, ModelNotFoundError, StoreNotFoundError.
"""

import logging
from typing import Optional

from projectstore.domain.stores.entities import Store
from projectstore.domain.stores.errors import (
    StoreNameCannotBeEmptyError,
    StoreNotFoundError,
)
from projectstore.domain.stores.ports import StoreRepository

logger = logging.getLogger(__name__)


class StoreService:
    """Orchestrates store creation, lookup and deletion.

    Enforces that a store name is never empty before it reaches
    the repository, and turns a failed delete into StoreNotFoundError.
    """

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def create(self, name: Optional[str]) -> Store:
        """Create a store.

        Args:
            name: Display name of the new store.

        Returns:
            The persisted store, carrying its assigned id.

        Raises:
            StoreNameCannotBeEmptyError: If name is missing or empty.
        """
        if not name:
            logger.warning("Rejected store creation with empty name")
            raise StoreNameCannotBeEmptyError()

        store = self._store_repo.create(name)
        logger.info("Created store id=%d", store.id)
        return store

    def get_store(self, store_id: int) -> Store:
        """Return a store by id.

        Raises:
            ModelNotFoundError: If the store does not exist.
        """
        logger.debug("Retrieving store id=%d", store_id)
        return self._store_repo.get_by_id(store_id)

    def delete_store_by_id(self, store_id: int) -> None:
        """Delete a store by id.

        Raises:
            StoreNotFoundError: If the store does not exist.
        """
        if not self._store_repo.delete_by_id(store_id):
            raise StoreNotFoundError(store_id)
        logger.info("Deleted store id=%d", store_id)
