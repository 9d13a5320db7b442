"""Shared fixtures for inventory tests.

Every test gets its own SQLite database file under ``tmp_path``. Engines
use ``NullPool`` so no connection outlives the event loop that opened
it; the API client runs each request on its own loop.
"""

import asyncio
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from inventory_api.catalog.defaults import DEFAULT_CATEGORIES
from inventory_api.catalog.repository import InventoryStore
from inventory_api.catalog.service import InventoryService
from inventory_api.infrastructure.database import create_tables, get_session_factory
from inventory_api.main import app


def make_engine(path) -> AsyncEngine:
    """Create a SQLite engine for a database file."""
    return create_async_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine on a fresh database with all tables."""
    engine = make_engine(tmp_path / "inventory.db")
    await create_tables(bind=engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def store(session_factory: async_sessionmaker[AsyncSession]) -> InventoryStore:
    """Inventory store on the test database."""
    return InventoryStore(session_factory)


@pytest.fixture
def service(store: InventoryStore) -> InventoryService:
    """Inventory service that does not check category references."""
    return InventoryService(store, enforce_category_references=False)


@pytest.fixture
def api_session_factory(tmp_path) -> Generator[async_sessionmaker[AsyncSession], None, None]:
    """Session factory for a fresh database, created outside any event loop."""
    engine = make_engine(tmp_path / "api.db")
    asyncio.run(create_tables(bind=engine))
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def client(api_session_factory: async_sessionmaker[AsyncSession]) -> Generator[TestClient, None, None]:
    """Create test client backed by a fresh, empty database."""
    app.dependency_overrides[get_session_factory] = lambda: api_session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def categorized_client(
    client: TestClient, api_session_factory: async_sessionmaker[AsyncSession]
) -> TestClient:
    """Create test client whose database holds the default categories only."""
    store = InventoryStore(api_session_factory)
    asyncio.run(store.seed_categories_if_empty(DEFAULT_CATEGORIES))
    return client


@pytest.fixture
def product_payload() -> dict:
    """A valid product creation body."""
    return {
        "name": "Pro Widget",
        "description": "A widget for professionals",
        "quantity": 5,
        "categories": ["Electronics"],
    }
