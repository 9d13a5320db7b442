"""Product Inventory Catalog.

Provides validation, query building, pagination, persistence and seeding
for categories and products.
"""

from inventory_api.catalog.models import Category, Product, ProductCategory
from inventory_api.catalog.pagination import PaginatedResult, PaginationParams
from inventory_api.catalog.query import build_product_predicate
from inventory_api.catalog.repository import InventoryStore, SeedResult
from inventory_api.catalog.service import InventoryService, get_inventory_service
from inventory_api.catalog.validation import FilterCriteria, ProductCreate

__all__ = [
    # Models
    "Category",
    "Product",
    "ProductCategory",
    # Validation
    "FilterCriteria",
    "ProductCreate",
    # Query
    "build_product_predicate",
    # Pagination
    "PaginatedResult",
    "PaginationParams",
    # Store
    "InventoryStore",
    "SeedResult",
    # Service
    "InventoryService",
    "get_inventory_service",
]
