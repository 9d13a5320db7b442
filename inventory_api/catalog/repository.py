"""Inventory store for database operations.

Owns all persisted Category and Product records. Every operation opens
its own session from the injected factory, so independent reads can run
concurrently and no session outlives a call.
"""

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import structlog
from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory_api.catalog.models import Category, Product, ProductCategory, utcnow
from inventory_api.catalog.validation import ProductCreate
from inventory_api.domain.exceptions import DuplicateNameError, StoreUnavailableError

logger = structlog.get_logger()

# Largest OFFSET a 64-bit SQL integer can carry
MAX_SQL_OFFSET = 2**63 - 1


@dataclass
class SeedResult:
    """Outcome of a seed call.

    Attributes:
        categories_created: Number of categories inserted.
        products_created: Number of products inserted.
        skipped_products: Names of default products dropped for having
            no known category.
    """

    categories_created: int = 0
    products_created: int = 0
    skipped_products: list[str] = field(default_factory=list)

    @property
    def seeded(self) -> bool:
        """Whether this call inserted anything."""
        return bool(self.categories_created or self.products_created)


class InventoryStore:
    """Store for Category and Product records.

    Example usage:
        store = InventoryStore(async_session_factory)
        product = await store.insert_product(payload)
        page = await store.find_products(predicate, skip=0, limit=12)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize store with a session factory.

        Args:
            session_factory: Factory producing async SQLAlchemy sessions.
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a session, translating driver failures.

        Integrity errors pass through untouched for the caller to classify.
        """
        try:
            async with self.session_factory() as session:
                yield session
        except IntegrityError:
            raise
        except (DBAPIError, OSError) as e:
            logger.error(
                "Store operation failed",
                operation=operation,
                error=str(e),
            )
            raise StoreUnavailableError(operation, str(e)) from e

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def insert_product(self, payload: ProductCreate) -> Product:
        """Persist a new product.

        Args:
            payload: Validated creation payload.

        Returns:
            The stored product with id and timestamps assigned.

        Raises:
            DuplicateNameError: If a product with the same name exists,
                compared case-insensitively.
        """
        now = utcnow()
        product = Product(
            name=payload.name,
            description=payload.description,
            quantity=payload.quantity,
            created_at=now,
            updated_at=now,
            category_links=[
                ProductCategory(name=name, position=position)
                for position, name in enumerate(payload.categories)
            ],
        )

        async with self._session("insert_product") as session:
            session.add(product)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                logger.info("Duplicate product name rejected", name=payload.name)
                raise DuplicateNameError(payload.name) from e

        logger.info("Product created", product_id=product.id, name=product.name)
        return product

    async def get_product(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Public product ID.

        Returns:
            Product if found, None otherwise.
        """
        async with self._session("get_product") as session:
            result = await session.execute(select(Product).where(Product.id == product_id))
            return result.scalar_one_or_none()

    async def find_products(
        self,
        predicate: ColumnElement[bool],
        skip: int = 0,
        limit: int = 12,
    ) -> Sequence[Product]:
        """Find products matching a predicate, newest first.

        Ties on ``created_at`` are broken by insertion order. A ``skip``
        beyond what the database can represent is capped, which still
        selects no rows.

        Args:
            predicate: WHERE clause from the query builder.
            skip: Number of matching rows to skip.
            limit: Maximum results.

        Returns:
            Sequence of matching products.
        """
        query = (
            select(Product)
            .where(predicate)
            .order_by(Product.created_at.desc(), Product.seq.asc())
            .offset(min(skip, MAX_SQL_OFFSET))
            .limit(limit)
        )

        async with self._session("find_products") as session:
            result = await session.execute(query)
            return result.scalars().all()

    async def count_products(self, predicate: ColumnElement[bool]) -> int:
        """Count products matching a predicate.

        Args:
            predicate: WHERE clause from the query builder.

        Returns:
            Count of matching products, independent of pagination.
        """
        query = select(func.count(Product.seq)).where(predicate)

        async with self._session("count_products") as session:
            result = await session.execute(query)
            return result.scalar_one()

    async def delete_product(self, product_id: str) -> bool:
        """Delete a product by ID.

        Args:
            product_id: Public product ID.

        Returns:
            True if a product was removed, False if none had that ID.
        """
        product_seq = select(Product.seq).where(Product.id == product_id).scalar_subquery()

        async with self._session("delete_product") as session:
            await session.execute(
                delete(ProductCategory)
                .where(ProductCategory.product_seq == product_seq)
                .execution_options(synchronize_session=False)
            )
            result = await session.execute(
                delete(Product)
                .where(Product.id == product_id)
                .execution_options(synchronize_session=False)
            )
            await session.commit()

        removed = result.rowcount > 0
        if removed:
            logger.info("Product deleted", product_id=product_id)
        return removed

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def list_categories(self) -> Sequence[Category]:
        """Get all categories sorted by name.

        Returns:
            Categories in ascending name order.
        """
        async with self._session("list_categories") as session:
            result = await session.execute(select(Category).order_by(Category.name.asc()))
            return result.scalars().all()

    async def category_names(self) -> set[str]:
        """Get the set of known category names."""
        async with self._session("category_names") as session:
            result = await session.execute(select(Category.name))
            return set(result.scalars().all())

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    async def _row_count(self, session: AsyncSession, column: Any) -> int:
        """Count all rows of the table owning ``column``."""
        return (await session.execute(select(func.count(column)))).scalar_one()

    async def seed_categories_if_empty(self, names: Sequence[str]) -> int:
        """Insert default categories when the table is empty.

        A concurrent seeder that wins the race makes this call's insert
        fail on the unique name index; that failure is a no-op.

        Args:
            names: Category names to insert.

        Returns:
            Number of categories inserted.
        """
        async with self._session("seed_categories") as session:
            existing = await self._row_count(session, Category.id)
            if existing > 0:
                return 0

            now = utcnow()
            session.add_all([Category(name=name, created_at=now) for name in names])
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.info("Categories already seeded by a concurrent caller")
                return 0

        logger.info("Categories seeded", count=len(names))
        return len(names)

    async def seed_products_if_empty(
        self,
        products: Sequence[ProductCreate],
        known_categories: set[str],
        created_at: datetime | None = None,
    ) -> tuple[int, list[str]]:
        """Insert default products when the table is empty.

        Each product's categories are narrowed to ``known_categories``;
        products left with none are skipped. The whole batch shares one
        timestamp so it lists in declaration order.

        Args:
            products: Validated default products.
            known_categories: Category names that exist.
            created_at: Timestamp for the batch. Defaults to now.

        Returns:
            Tuple of (products inserted, names of skipped products).
        """
        async with self._session("seed_products") as session:
            existing = await self._row_count(session, Product.seq)
            if existing > 0:
                return 0, []

            now = created_at or utcnow()
            rows = []
            skipped = []
            for payload in products:
                categories = [c for c in payload.categories if c in known_categories]
                if not categories:
                    skipped.append(payload.name)
                    continue
                rows.append(
                    Product(
                        name=payload.name,
                        description=payload.description,
                        quantity=payload.quantity,
                        created_at=now,
                        updated_at=now,
                        category_links=[
                            ProductCategory(name=name, position=position)
                            for position, name in enumerate(categories)
                        ],
                    )
                )

            if skipped:
                logger.warning("Default products skipped, no known category", products=skipped)

            session.add_all(rows)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.info("Products already seeded by a concurrent caller")
                return 0, skipped

        logger.info("Products seeded", count=len(rows))
        return len(rows), skipped

    async def seed_if_empty(
        self,
        categories: Sequence[str],
        products: Sequence[ProductCreate],
    ) -> SeedResult:
        """Seed categories, then products, each only if its table is empty.

        Safe to call repeatedly and from concurrent processes.

        Args:
            categories: Default category names.
            products: Default products.

        Returns:
            What this call inserted.
        """
        categories_created = await self.seed_categories_if_empty(categories)
        known = await self.category_names()
        products_created, skipped = await self.seed_products_if_empty(products, known)
        return SeedResult(
            categories_created=categories_created,
            products_created=products_created,
            skipped_products=skipped,
        )
