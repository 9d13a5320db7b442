"""Translate validated filter criteria into store predicates."""

from sqlalchemy import ColumnElement, and_, true

from inventory_api.catalog.models import Product, ProductCategory
from inventory_api.catalog.validation import FilterCriteria


def build_product_predicate(criteria: FilterCriteria) -> ColumnElement[bool]:
    """Build the WHERE clause for a product listing.

    Search is a case-insensitive substring match on the name, taken
    literally (``%`` and ``_`` are not wildcards). Categories use
    match-any semantics: a product matches if it has at least one of
    the requested categories.

    Args:
        criteria: Validated filter criteria.

    Returns:
        Boolean clause; ``true()`` when no filter applies.
    """
    conditions = []

    if criteria.search:
        conditions.append(Product.name.icontains(criteria.search, autoescape=True))

    if criteria.categories:
        conditions.append(
            Product.category_links.any(ProductCategory.name.in_(criteria.categories))
        )

    if not conditions:
        return true()
    return and_(*conditions)
