"""
Domain-specific errors for the stores bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class StoreDomainError(Exception):
    """Base error for all stores domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class StoreNameCannotBeEmptyError(StoreDomainError):
    """Raised when a store is created without a name."""

    def __init__(self) -> None:
        super().__init__("Store name cannot be empty")


class ModelNotFoundError(StoreDomainError):
    """Raised by a repository when no row matches the requested id."""

    def __init__(self, model: str, model_id: int) -> None:
        super().__init__(f"{model} not found: {model_id}")
        self.model = model
        self.model_id = model_id


class StoreNotFoundError(StoreDomainError):
    """Raised when an operation targets a store that does not exist."""

    def __init__(self, store_id: int) -> None:
        super().__init__(f"Store not found: {store_id}")
        self.store_id = store_id
