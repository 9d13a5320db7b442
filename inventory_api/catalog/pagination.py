"""Pagination arithmetic.

Pure calculations shared by the listing service and the API schemas.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page: Page number (1-indexed).
        limit: Items per page.
    """

    page: int = 1
    limit: int = 12

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items, 0 when there are none."""
    return (total + limit - 1) // limit


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    The requested page is never clamped: a page past the end has no
    items but still reports consistent flags.

    Attributes:
        items: List of items.
        total: Total count of matching items.
        page: Current page.
        limit: Items per page.
    """

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return total_pages(self.total, self.limit)

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1
