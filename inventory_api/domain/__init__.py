"""Domain layer - inventory errors.

Exceptions raised below the API layer and translated to HTTP responses
by the exception handlers in ``inventory_api.main``.
"""

from inventory_api.domain.exceptions import (
    DuplicateNameError,
    FieldError,
    InventoryError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)

__all__ = [
    "DuplicateNameError",
    "FieldError",
    "InventoryError",
    "NotFoundError",
    "StoreUnavailableError",
    "ValidationError",
]
