"""Tests for the inventory store."""

import asyncio
from datetime import datetime, timezone

import pytest
from sqlalchemy import true
from sqlalchemy.exc import OperationalError

from inventory_api.catalog.defaults import DEFAULT_CATEGORIES, default_products
from inventory_api.catalog.models import Product
from inventory_api.catalog.repository import InventoryStore
from inventory_api.catalog.validation import ProductCreate
from inventory_api.domain.exceptions import DuplicateNameError, StoreUnavailableError


def _payload(name: str, categories: list[str] | None = None) -> ProductCreate:
    return ProductCreate(
        name=name,
        description=f"About {name}",
        quantity=3,
        categories=categories or ["Books"],
    )


class TestInsertProduct:
    """Tests for InventoryStore.insert_product."""

    @pytest.mark.asyncio
    async def test_assigns_id_and_timestamps(self, store: InventoryStore) -> None:
        """Stored products get an id and equal created/updated timestamps."""
        product = await store.insert_product(_payload("Desk Lamp", ["Books", "Electronics"]))

        assert product.id
        assert product.created_at == product.updated_at
        assert product.categories == ["Books", "Electronics"]

        stored = await store.get_product(product.id)
        assert stored is not None
        assert stored.name == "Desk Lamp"
        assert stored.categories == ["Books", "Electronics"]

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, store: InventoryStore) -> None:
        """Each product gets a distinct id."""
        first = await store.insert_product(_payload("One"))
        second = await store.insert_product(_payload("Two"))

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_duplicate_name_case_insensitive(self, store: InventoryStore) -> None:
        """A name differing only in case is a duplicate."""
        await store.insert_product(_payload("Widget"))

        with pytest.raises(DuplicateNameError) as exc_info:
            await store.insert_product(_payload("widget"))

        assert exc_info.value.error_code == "DUPLICATE_NAME"
        assert await store.count_products(true()) == 1

    @pytest.mark.asyncio
    async def test_concurrent_duplicates_single_winner(self, store: InventoryStore) -> None:
        """Of two racing inserts with the same name exactly one succeeds."""
        results = await asyncio.gather(
            store.insert_product(_payload("Racer")),
            store.insert_product(_payload("RACER")),
            return_exceptions=True,
        )

        stored = [r for r in results if isinstance(r, Product)]
        rejected = [r for r in results if isinstance(r, DuplicateNameError)]
        assert len(stored) == 1
        assert len(rejected) == 1
        assert await store.count_products(true()) == 1


class TestFindProducts:
    """Tests for InventoryStore.find_products and count_products."""

    @pytest.mark.asyncio
    async def test_newest_first(self, store: InventoryStore) -> None:
        """Products are listed by creation time, newest first."""
        for name in ("First", "Second", "Third"):
            await store.insert_product(_payload(name))

        products = await store.find_products(true())

        assert [p.name for p in products] == ["Third", "Second", "First"]

    @pytest.mark.asyncio
    async def test_ties_keep_insertion_order(self, store: InventoryStore) -> None:
        """Products sharing a timestamp list in insertion order."""
        batch_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
        products = [_payload(f"Item {i}") for i in range(4)]

        await store.seed_products_if_empty(products, {"Books"}, created_at=batch_time)

        listed = await store.find_products(true())
        assert [p.name for p in listed] == ["Item 0", "Item 1", "Item 2", "Item 3"]

    @pytest.mark.asyncio
    async def test_skip_and_limit(self, store: InventoryStore) -> None:
        """Skip and limit select a window of the ordered results."""
        batch_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
        products = [_payload(f"P{i:02d}") for i in range(25)]
        await store.seed_products_if_empty(products, {"Books"}, created_at=batch_time)

        window = await store.find_products(true(), skip=20, limit=10)

        assert [p.name for p in window] == ["P20", "P21", "P22", "P23", "P24"]
        assert await store.count_products(true()) == 25

    @pytest.mark.asyncio
    async def test_empty_store(self, store: InventoryStore) -> None:
        """An empty store yields no products and a zero count."""
        assert list(await store.find_products(true())) == []
        assert await store.count_products(true()) == 0


class TestDeleteProduct:
    """Tests for InventoryStore.delete_product."""

    @pytest.mark.asyncio
    async def test_delete_existing(self, store: InventoryStore) -> None:
        """Deleting removes the product and its category set."""
        product = await store.insert_product(_payload("Lamp", ["Books", "Electronics"]))

        assert await store.delete_product(product.id) is True
        assert await store.get_product(product.id) is None
        assert await store.count_products(true()) == 0

    @pytest.mark.asyncio
    async def test_delete_unknown(self, store: InventoryStore) -> None:
        """Deleting an unknown id reports nothing removed."""
        assert await store.delete_product("does-not-exist") is False

    @pytest.mark.asyncio
    async def test_name_reusable_after_delete(self, store: InventoryStore) -> None:
        """A deleted product's name can be used again."""
        product = await store.insert_product(_payload("Lamp"))
        await store.delete_product(product.id)

        again = await store.insert_product(_payload("LAMP"))

        assert again.id != product.id


class TestCategories:
    """Tests for category reads."""

    @pytest.mark.asyncio
    async def test_sorted_by_name(self, store: InventoryStore) -> None:
        """Categories are returned in ascending name order."""
        await store.seed_categories_if_empty(["Toys & Games", "Books", "Electronics"])

        categories = await store.list_categories()

        assert [c.name for c in categories] == ["Books", "Electronics", "Toys & Games"]
        assert await store.category_names() == {"Books", "Electronics", "Toys & Games"}

    @pytest.mark.asyncio
    async def test_empty(self, store: InventoryStore) -> None:
        """No categories before seeding."""
        assert list(await store.list_categories()) == []


class TestSeeding:
    """Tests for the seed operations."""

    @pytest.mark.asyncio
    async def test_seed_if_empty(self, store: InventoryStore) -> None:
        """First seed inserts the defaults and skips products with no known category."""
        result = await store.seed_if_empty(DEFAULT_CATEGORIES, default_products())

        assert result.seeded
        assert result.categories_created == len(DEFAULT_CATEGORIES)
        assert result.products_created == len(default_products()) - 1
        assert result.skipped_products == ["Vintage Collectible Stamp Album"]

    @pytest.mark.asyncio
    async def test_seeded_categories_narrowed_to_known(self, store: InventoryStore) -> None:
        """Seeded products keep only categories that exist."""
        await store.seed_if_empty(DEFAULT_CATEGORIES, default_products())

        products = await store.find_products(true(), limit=100)

        by_name = {p.name: p for p in products}
        assert by_name["Apple iPhone 14 Pro Max"].categories == ["Electronics"]
        known = set(DEFAULT_CATEGORIES)
        assert all(set(p.categories) <= known for p in products)

    @pytest.mark.asyncio
    async def test_seed_is_idempotent(self, store: InventoryStore) -> None:
        """A second seed inserts nothing."""
        await store.seed_if_empty(DEFAULT_CATEGORIES, default_products())

        result = await store.seed_if_empty(DEFAULT_CATEGORIES, default_products())

        assert not result.seeded
        assert len(await store.list_categories()) == len(DEFAULT_CATEGORIES)

    @pytest.mark.asyncio
    async def test_products_not_seeded_when_present(self, store: InventoryStore) -> None:
        """Any existing product blocks product seeding."""
        await store.insert_product(_payload("Existing"))

        created, skipped = await store.seed_products_if_empty(default_products(), set(DEFAULT_CATEGORIES))

        assert (created, skipped) == (0, [])
        assert await store.count_products(true()) == 1

    @pytest.mark.asyncio
    async def test_seeded_batch_lists_in_declaration_order(self, store: InventoryStore) -> None:
        """The default batch shares a timestamp and lists in declaration order."""
        await store.seed_if_empty(DEFAULT_CATEGORIES, default_products())

        listed = await store.find_products(true(), limit=100)

        expected = [p.name for p in default_products() if p.name != "Vintage Collectible Stamp Album"]
        assert [p.name for p in listed] == expected

    @pytest.mark.asyncio
    async def test_lost_race_is_a_no_op(
        self, store: InventoryStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A seeder that saw empty tables but lost the insert race creates nothing."""
        await store.seed_if_empty(DEFAULT_CATEGORIES, default_products())

        async def looks_empty(session, column) -> int:
            return 0

        monkeypatch.setattr(store, "_row_count", looks_empty)

        assert await store.seed_categories_if_empty(DEFAULT_CATEGORIES) == 0
        created, _ = await store.seed_products_if_empty(default_products(), set(DEFAULT_CATEGORIES))
        assert created == 0

    @pytest.mark.asyncio
    async def test_concurrent_seeds(self, store: InventoryStore) -> None:
        """Concurrent seeders leave exactly one copy of the defaults."""
        results = await asyncio.gather(
            store.seed_if_empty(DEFAULT_CATEGORIES, default_products()),
            store.seed_if_empty(DEFAULT_CATEGORIES, default_products()),
        )

        assert sum(r.categories_created for r in results) == len(DEFAULT_CATEGORIES)
        assert len(await store.list_categories()) == len(DEFAULT_CATEGORIES)
        assert await store.count_products(true()) == len(default_products()) - 1


class TestStoreUnavailable:
    """Tests for driver failure translation."""

    @pytest.mark.asyncio
    async def test_driver_error_becomes_store_unavailable(
        self, store: InventoryStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Driver-level failures surface as StoreUnavailableError."""

        class BrokenSession:
            async def __aenter__(self):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))

            async def __aexit__(self, *args) -> None:
                return None

        monkeypatch.setattr(store, "session_factory", lambda: BrokenSession())

        with pytest.raises(StoreUnavailableError) as exc_info:
            await store.count_products(true())

        assert exc_info.value.error_code == "STORE_UNAVAILABLE"
        assert exc_info.value.operation == "count_products"
