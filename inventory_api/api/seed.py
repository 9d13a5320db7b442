"""Seed API endpoints.

Populate default categories and sample products. Both endpoints are
idempotent: 201 when this call inserted data, 200 when it was already
there.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from inventory_api.api.dependencies import get_service
from inventory_api.api.schemas import ErrorResponse, SeedResponse
from inventory_api.catalog.service import InventoryService

router = APIRouter(prefix="/seed", tags=["Seed"])


@router.post(
    "",
    response_model=SeedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"model": SeedResponse, "description": "Already seeded"},
        500: {"model": ErrorResponse},
    },
    summary="Seed database",
    description="Insert default categories and products if the tables are empty.",
)
async def seed_database(
    response: Response,
    service: Annotated[InventoryService, Depends(get_service)],
) -> SeedResponse:
    """Seed default categories, then default products."""
    result = await service.seed()

    if not result.seeded:
        response.status_code = status.HTTP_200_OK
        return SeedResponse(message="Database already seeded")

    return SeedResponse(
        message="Database seeded successfully",
        categories_created=result.categories_created,
        products_created=result.products_created,
    )


@router.post(
    "/products",
    response_model=SeedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"model": SeedResponse, "description": "Already seeded"},
        500: {"model": ErrorResponse},
    },
    summary="Seed products",
    description="Insert default products if the product table is empty.",
)
async def seed_products(
    response: Response,
    service: Annotated[InventoryService, Depends(get_service)],
) -> SeedResponse:
    """Seed default products against the existing categories."""
    result = await service.seed_products()

    if not result.seeded:
        response.status_code = status.HTTP_200_OK
        return SeedResponse(message="Products already seeded")

    return SeedResponse(
        message="Products seeded successfully",
        products_created=result.products_created,
    )
