"""
SQLAlchemy ORM models for the stores bounded context.
"""

from sqlalchemy import Column, Integer, String

from projectstore.infrastructure.database import Base


class StoreModel(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
