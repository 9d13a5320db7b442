"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from inventory_api.api.dependencies import get_service
from inventory_api.api.schemas import CategoryResponse, ErrorResponse
from inventory_api.catalog.service import InventoryService

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=list[CategoryResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
    description="Get all categories sorted by name.",
)
async def list_categories(
    service: Annotated[InventoryService, Depends(get_service)],
) -> list[CategoryResponse]:
    """List all categories in ascending name order."""
    categories = await service.list_categories()
    return [CategoryResponse.from_model(c) for c in categories]
