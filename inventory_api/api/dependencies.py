"""FastAPI dependencies.

Injects the process-wide database handle into services. Tests override
``get_session_factory`` to point the whole API at another database.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory_api.catalog.service import InventoryService, get_inventory_service
from inventory_api.infrastructure.database import get_session_factory

SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)]


def get_service(session_factory: SessionFactory) -> InventoryService:
    """Get inventory service bound to the injected session factory."""
    return get_inventory_service(session_factory)
