"""
SQLAlchemy engine and declarative base.

The engine is built once per process from application settings.
"""

import logging
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from projectstore.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the SQLAlchemy engine from application settings."""
    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_schema(engine: Engine) -> None:
    """Create all mapped tables that do not exist yet."""
    # Models must be imported so they register on Base.metadata.
    from projectstore.infrastructure.stores import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready.")
