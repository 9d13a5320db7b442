"""API layer module.

Contains FastAPI routers and response schemas.
"""

from inventory_api.api.categories import router as categories_router
from inventory_api.api.health import router as health_router
from inventory_api.api.products import router as products_router
from inventory_api.api.seed import router as seed_router

__all__ = [
    "categories_router",
    "health_router",
    "products_router",
    "seed_router",
]
