"""Product API endpoints.

Provides endpoints for the product inventory:
- GET /products - search, filter and paginate products
- GET /products/{id} - product details
- POST /products - create a product
- DELETE /products/{id} - delete a product
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from inventory_api.api.dependencies import get_service
from inventory_api.api.schemas import ErrorResponse, ProductListResponse, ProductResponse
from inventory_api.catalog.service import InventoryService

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="List products",
    description="Search, filter and paginate products, newest first.",
)
async def list_products(
    service: Annotated[InventoryService, Depends(get_service)],
    search: str | None = Query(default=None, description="Case-insensitive name substring"),
    categories: str | None = Query(
        default=None, description="Comma-separated category names (match any)"
    ),
    page: str | None = Query(default=None, description="Page number (default 1)"),
    limit: str | None = Query(default=None, description="Items per page (default 12, max 100)"),
) -> ProductListResponse:
    """List products with filtering and pagination.

    Parameters arrive as raw text and are validated by the service so
    that every invalid parameter is reported in one 400 response.

    Args:
        service: Inventory service.
        search: Name substring.
        categories: Comma-separated category names.
        page: Page number (1-based).
        limit: Items per page.

    Returns:
        One page of products with pagination flags.
    """
    result = await service.list_products(
        {
            "search": search,
            "categories": categories,
            "page": page,
            "limit": limit,
        }
    )
    return ProductListResponse.from_result(result)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: str,
    service: Annotated[InventoryService, Depends(get_service)],
) -> ProductResponse:
    """Get a product by ID.

    Raises:
        NotFoundError: If the product does not exist.
    """
    product = await service.get_product(product_id)
    return ProductResponse.from_model(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create product",
    description="Create a product. Names are unique regardless of case.",
)
async def create_product(
    service: Annotated[InventoryService, Depends(get_service)],
    payload: Annotated[Any, Body()] = None,
) -> ProductResponse:
    """Create a product.

    Args:
        service: Inventory service.
        payload: Raw JSON body with name, description, quantity and
            categories.

    Returns:
        The created product.
    """
    product = await service.create_product(payload)
    return ProductResponse.from_model(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(
    product_id: str,
    service: Annotated[InventoryService, Depends(get_service)],
) -> Response:
    """Delete a product by ID.

    Raises:
        NotFoundError: If the product does not exist.
    """
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
