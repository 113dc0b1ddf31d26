"""
Adapter: Store repository.

Implements StoreRepository port.
Persists stores with the SQLAlchemy ORM.
"""

import logging

from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from projectstore.domain.stores.entities import Store
from projectstore.domain.stores.errors import ModelNotFoundError
from projectstore.domain.stores.ports import StoreRepository
from projectstore.infrastructure.stores.models import StoreModel

logger = logging.getLogger(__name__)


class SqlAlchemyStoreRepository(StoreRepository):
    """Persists stores to a relational database.

    Implements the StoreRepository port defined in the domain layer.
    Opens one session per call.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, name: str) -> Store:
        """Insert a store row and return the entity with its new id."""
        with Session(self._engine) as session:
            row = StoreModel(name=name)
            session.add(row)
            session.commit()
            session.refresh(row)
            logger.debug("Inserted store id=%d.", row.id)
            return _to_entity(row)

    def get_by_id(self, store_id: int) -> Store:
        """Return the store with the given id.

        Raises:
            ModelNotFoundError: If no row matches.
        """
        with Session(self._engine) as session:
            row = session.get(StoreModel, store_id)
            if row is None:
                raise ModelNotFoundError("Store", store_id)
            return _to_entity(row)

    def delete_by_id(self, store_id: int) -> bool:
        """Delete the store row. Returns True if one was removed."""
        with Session(self._engine) as session:
            result = session.execute(
                delete(StoreModel).where(StoreModel.id == store_id)
            )
            session.commit()
            return result.rowcount > 0


def _to_entity(row: StoreModel) -> Store:
    return Store(id=row.id, name=row.name)
