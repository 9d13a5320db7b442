"""Database configuration and session management.

Provides async SQLAlchemy engine and session factory. The engine is
process-wide: created once at import, checked lazily through
``pool_pre_ping`` on checkout and disposed by the application lifespan.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from inventory_api.infrastructure.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for models
Base = declarative_base()


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the process-wide session factory.

    Returns:
        Session factory bound to the process engine.
    """
    return async_session_factory


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create database tables and indexes if they don't exist.

    Args:
        bind: Engine to create tables on. Defaults to the process engine.
    """
    # Register models on the metadata before create_all
    import inventory_api.catalog.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(factory: async_sessionmaker[AsyncSession] | None = None) -> None:
    """Run a trivial statement to prove the database is reachable.

    Args:
        factory: Session factory to check. Defaults to the process factory.
    """
    async with (factory or async_session_factory)() as session:
        await session.execute(text("SELECT 1"))


async def dispose_engine() -> None:
    """Close all pooled connections held by the process engine."""
    await engine.dispose()
