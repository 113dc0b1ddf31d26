"""
Domain entities for the stores bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Store:
    """A store identified by a persistence-assigned integer id.

    Attributes:
        id: Identifier assigned by the repository on creation.
        name: Non-empty display name.
    """

    id: int
    name: str
