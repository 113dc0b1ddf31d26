"""
Project Store: a small CRUD service for Store resources.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - stores: Create, read and delete Store entities.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: The Store Service orchestrating domain ports.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
