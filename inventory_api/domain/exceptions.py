"""Domain exceptions.

All inventory-level errors. The API layer maps each class to an HTTP
status and error code; nothing below the API layer knows about HTTP.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """A single violated field constraint.

    Attributes:
        field: Dotted path of the offending field (e.g. "categories.2").
        message: Human-readable description of the violation.
    """

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"field": self.field, "message": self.message}


class InventoryError(Exception):
    """Base class for all inventory exceptions.

    All inventory errors inherit from this class to allow
    catching them at the API layer.
    """

    error_code = "INVENTORY_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize inventory error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(InventoryError):
    """Raised when input fails one or more field constraints.

    Carries every broken constraint, not just the first, so the caller
    can report all problems at once.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(self, errors: list[FieldError], message: str = "Validation failed") -> None:
        """Initialize validation error.

        Args:
            errors: All violated field constraints.
            message: Summary message.
        """
        super().__init__(message, details={"errors": [e.to_dict() for e in errors]})
        self.errors = list(errors)


class DuplicateNameError(InventoryError):
    """Raised when a product name collides with an existing product."""

    error_code = "DUPLICATE_NAME"

    def __init__(self, name: str) -> None:
        """Initialize duplicate name error.

        Args:
            name: The rejected product name.
        """
        super().__init__(
            f"A product named '{name}' already exists",
            details={"name": name},
        )
        self.name = name


class NotFoundError(InventoryError):
    """Raised when a lookup or delete targets an unknown id."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: str) -> None:
        """Initialize not found error.

        Args:
            entity_type: Type of entity (e.g., "Product").
            entity_id: ID that was not found.
        """
        super().__init__(
            f"{entity_type} not found: {entity_id}",
            details={"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class StoreUnavailableError(InventoryError):
    """Raised when the backing store cannot be reached or fails.

    The message is for logs only; the API layer never returns it.
    """

    error_code = "STORE_UNAVAILABLE"

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize store unavailable error.

        Args:
            operation: Store operation that failed.
            reason: Underlying driver error text.
        """
        super().__init__(
            f"Store operation '{operation}' failed: {reason}",
            details={"operation": operation},
        )
        self.operation = operation
