"""Inventory service for product operations.

High-level service that combines validation, query building, the store
and pagination into the operations exposed by the API.
"""

import asyncio
from collections.abc import Mapping, Sequence
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory_api.catalog.defaults import DEFAULT_CATEGORIES, default_products
from inventory_api.catalog.models import Category, Product
from inventory_api.catalog.pagination import PaginatedResult, PaginationParams
from inventory_api.catalog.query import build_product_predicate
from inventory_api.catalog.repository import InventoryStore, SeedResult
from inventory_api.catalog.validation import ProductCreate, validate_filters, validate_product
from inventory_api.domain.exceptions import FieldError, NotFoundError, ValidationError
from inventory_api.infrastructure.config import settings
from inventory_api.infrastructure.database import async_session_factory

logger = structlog.get_logger()


class InventoryService:
    """Service for inventory operations.

    Example usage:
        service = InventoryService(InventoryStore(async_session_factory))
        await service.seed()
        page = await service.list_products({"search": "pro", "page": 1})
    """

    def __init__(
        self,
        store: InventoryStore,
        enforce_category_references: bool | None = None,
    ) -> None:
        """Initialize service with a store.

        Args:
            store: Inventory store.
            enforce_category_references: Reject unknown category names on
                create. Defaults to ``settings.enforce_category_references``.
        """
        self.store = store
        if enforce_category_references is None:
            enforce_category_references = settings.enforce_category_references
        self.enforce_category_references = enforce_category_references

    async def list_products(self, raw_filters: Mapping[str, Any]) -> PaginatedResult[Product]:
        """Search products with filters and pagination.

        The page of items and the total count are read concurrently and
        may observe slightly different snapshots under concurrent writes.

        Args:
            raw_filters: Untrusted filter parameters (search, categories,
                page, limit).

        Returns:
            Paginated product results.

        Raises:
            ValidationError: If the filter parameters are invalid.
        """
        criteria = validate_filters(raw_filters)
        pagination = PaginationParams(page=criteria.page, limit=criteria.limit)
        predicate = build_product_predicate(criteria)

        products, total = await asyncio.gather(
            self.store.find_products(predicate, skip=pagination.offset, limit=pagination.limit),
            self.store.count_products(predicate),
        )

        logger.debug(
            "Products listed",
            search=criteria.search,
            categories=criteria.categories,
            page=pagination.page,
            limit=pagination.limit,
            total=total,
        )

        return PaginatedResult(
            items=list(products),
            total=total,
            page=pagination.page,
            limit=pagination.limit,
        )

    async def create_product(self, raw_payload: Any) -> Product:
        """Validate and create a product.

        Args:
            raw_payload: Untrusted request body.

        Returns:
            The created product.

        Raises:
            ValidationError: If the payload is invalid or references
                unknown categories.
            DuplicateNameError: If the name is already taken.
        """
        payload = validate_product(raw_payload)

        if self.enforce_category_references:
            await self._check_categories(payload)

        return await self.store.insert_product(payload)

    async def _check_categories(self, payload: ProductCreate) -> None:
        known = await self.store.category_names()
        errors = [
            FieldError(field=f"categories.{index}", message=f"Unknown category: {name}")
            for index, name in enumerate(payload.categories)
            if name not in known
        ]
        if errors:
            raise ValidationError(errors)

    async def get_product(self, product_id: str) -> Product:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            The product.

        Raises:
            NotFoundError: If no product has this ID.
        """
        product = await self.store.get_product(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    async def delete_product(self, product_id: str) -> None:
        """Delete product by ID.

        Args:
            product_id: Product ID.

        Raises:
            NotFoundError: If no product has this ID.
        """
        if not await self.store.delete_product(product_id):
            raise NotFoundError("Product", product_id)

    async def list_categories(self) -> Sequence[Category]:
        """Get categories sorted by name."""
        return await self.store.list_categories()

    async def seed(self) -> SeedResult:
        """Seed default categories and products if not present.

        Returns:
            What this call inserted.
        """
        result = await self.store.seed_if_empty(DEFAULT_CATEGORIES, default_products())
        logger.info(
            "Seed finished",
            categories_created=result.categories_created,
            products_created=result.products_created,
        )
        return result

    async def seed_products(self) -> SeedResult:
        """Seed default products only, against existing categories.

        Returns:
            What this call inserted.
        """
        known = await self.store.category_names()
        created, skipped = await self.store.seed_products_if_empty(default_products(), known)
        return SeedResult(products_created=created, skipped_products=skipped)


def get_inventory_service(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> InventoryService:
    """Get inventory service instance.

    Args:
        session_factory: Session factory for the store. Defaults to the
            process-wide factory.

    Returns:
        InventoryService instance.
    """
    return InventoryService(InventoryStore(session_factory or async_session_factory))
