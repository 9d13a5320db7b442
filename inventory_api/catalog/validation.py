"""Input validation for product payloads and listing filters.

Untrusted input is parsed into strict pydantic models here and nowhere
else. Every violated constraint is reported, not just the first one.
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StringConstraints, field_validator
from pydantic import ValidationError as PydanticValidationError

from inventory_api.domain.exceptions import FieldError, ValidationError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
QUANTITY_MAX = 999_999
MIN_CATEGORIES = 1
MAX_CATEGORIES = 5
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 12
MAX_LIMIT = 100

CategoryName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


def _dedupe(value: Any) -> Any:
    """Drop repeated entries from a list, keeping first occurrences."""
    if not isinstance(value, list):
        return value
    seen: set[Any] = set()
    unique = []
    for item in value:
        key = item.strip() if isinstance(item, str) else item
        try:
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            # Unhashable entries are left for the item validator to reject
            pass
        unique.append(item)
    return unique


class ProductCreate(BaseModel):
    """Validated product creation payload."""

    model_config = ConfigDict(extra="ignore")

    name: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH),
    ] = Field(..., description="Product name, unique case-insensitively")
    description: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=DESCRIPTION_MAX_LENGTH),
    ] = Field(..., description="Product description")
    quantity: StrictInt = Field(..., ge=0, le=QUANTITY_MAX, description="Units in stock")
    categories: list[CategoryName] = Field(
        ...,
        min_length=MIN_CATEGORIES,
        max_length=MAX_CATEGORIES,
        description="Category names (1 to 5)",
    )

    @field_validator("quantity", mode="before")
    @classmethod
    def _integral_float_to_int(cls, value: Any) -> Any:
        # JSON has one number type; 5.0 is the integer 5
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator("categories", mode="before")
    @classmethod
    def _unique_categories(cls, value: Any) -> Any:
        return _dedupe(value)


class FilterCriteria(BaseModel):
    """Validated product listing filter."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    search: str | None = Field(default=None, description="Case-insensitive name substring")
    categories: tuple[str, ...] | None = Field(
        default=None,
        description="Match products in any of these categories",
    )
    page: int = Field(default=DEFAULT_PAGE, ge=1, description="Page number (1-based)")
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Items per page")

    @field_validator("categories", mode="before")
    @classmethod
    def _split_categories(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple, set, frozenset)):
            names = [v.strip() if isinstance(v, str) else v for v in value]
            names = [n for n in _dedupe(names) if n != ""]
            return tuple(names) or None
        return value


def _to_field_errors(exc: PydanticValidationError) -> list[FieldError]:
    """Flatten pydantic error entries into field errors."""
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "__root__"
        errors.append(FieldError(field=field, message=err["msg"]))
    return errors


def validate_product(data: Any) -> ProductCreate:
    """Validate a product creation payload.

    Args:
        data: Decoded request body.

    Returns:
        The validated payload with trimmed strings and unique categories.

    Raises:
        ValidationError: If any field constraint is violated.
    """
    if not isinstance(data, Mapping):
        raise ValidationError([FieldError(field="__root__", message="Expected a JSON object")])
    try:
        return ProductCreate.model_validate(dict(data))
    except PydanticValidationError as e:
        raise ValidationError(_to_field_errors(e)) from e


def validate_filters(data: Mapping[str, Any]) -> FilterCriteria:
    """Validate listing filter parameters.

    Absent or empty values fall back to defaults. Query-string text for
    ``page`` and ``limit`` is coerced to integers.

    Args:
        data: Raw filter parameters.

    Returns:
        Validated filter criteria.

    Raises:
        ValidationError: If any field constraint is violated.
    """
    cleaned = {key: value for key, value in data.items() if value is not None and value != ""}
    try:
        return FilterCriteria.model_validate(cleaned)
    except PydanticValidationError as e:
        raise ValidationError(_to_field_errors(e)) from e
