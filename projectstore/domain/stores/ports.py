"""
Port interfaces (ABCs) for the stores bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from projectstore.domain.stores.entities import Store


class StoreRepository(ABC):
    """Port for persisting and retrieving stores."""

    @abstractmethod
    def create(self, name: str) -> Store:
        """Persist a new store and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, store_id: int) -> Store:
        """Return the store with the given id.

        Raises:
            ModelNotFoundError: If no store has this id.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, store_id: int) -> bool:
        """Delete a store. Returns True if a row was removed."""
        raise NotImplementedError
