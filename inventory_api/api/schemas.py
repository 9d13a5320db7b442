"""API schemas for the Product Inventory API.

Pydantic models for response serialization. Field names are camelCase
on the wire; request bodies are validated in ``inventory_api.catalog.validation``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from inventory_api.catalog.models import Category, Product
from inventory_api.catalog.pagination import PaginatedResult


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryResponse(CamelModel):
    """A product category."""

    id: str = Field(..., description="Category identifier")
    name: str = Field(..., description="Unique category name")
    created_at: datetime = Field(..., description="When the category was created")

    @classmethod
    def from_model(cls, category: Category) -> "CategoryResponse":
        """Build from a Category row."""
        return cls(id=category.id, name=category.name, created_at=category.created_at)


# ============================================================================
# Product Schemas
# ============================================================================


class ProductResponse(CamelModel):
    """A product record."""

    id: str = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    quantity: int = Field(..., description="Units in stock")
    categories: list[str] = Field(..., description="Category names")
    created_at: datetime = Field(..., description="When the product was created")
    updated_at: datetime = Field(..., description="When the product was last updated")

    @classmethod
    def from_model(cls, product: Product) -> "ProductResponse":
        """Build from a Product row."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            quantity=product.quantity,
            categories=product.categories,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(CamelModel):
    """One page of a product listing."""

    products: list[ProductResponse] = Field(..., description="Products on this page")
    total_count: int = Field(..., description="Products matching the filter")
    total_pages: int = Field(..., description="Number of pages for this filter")
    current_page: int = Field(..., description="Requested page number")
    has_next_page: bool = Field(..., description="Whether a later page exists")
    has_previous_page: bool = Field(..., description="Whether an earlier page exists")

    @classmethod
    def from_result(cls, result: PaginatedResult[Product]) -> "ProductListResponse":
        """Build from a paginated product result."""
        return cls(
            products=[ProductResponse.from_model(p) for p in result.items],
            total_count=result.total,
            total_pages=result.total_pages,
            current_page=result.page,
            has_next_page=result.has_next,
            has_previous_page=result.has_prev,
        )


# ============================================================================
# Seed Schemas
# ============================================================================


class SeedResponse(CamelModel):
    """Outcome of a seed request."""

    message: str = Field(..., description="Human-readable outcome")
    categories_created: int = Field(default=0, description="Categories inserted by this call")
    products_created: int = Field(default=0, description="Products inserted by this call")
