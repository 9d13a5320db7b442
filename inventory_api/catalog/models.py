"""SQLAlchemy models for the product inventory.

Defines Category, Product and ProductCategory tables for persistent storage.
A product's category set lives in ``product_categories`` so that
category filtering is an indexed lookup on every supported backend.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_api.infrastructure.database import Base


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Category(Base):
    """Category reference record.

    Attributes:
        id: Unique category identifier (UUID string).
        name: Category name, unique (case-sensitive).
        created_at: Creation timestamp.
    """

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, name={self.name})>"

    def to_dict(self) -> dict:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at,
        }


class Product(Base):
    """Product entity in the inventory.

    Attributes:
        seq: Internal insertion sequence, used to break created_at ties.
        id: Public product identifier (UUID string).
        name: Product name, unique case-insensitively.
        description: Product description.
        quantity: Units in stock.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        category_links: Rows of the product's category set.
    """

    __tablename__ = "products"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    # Relationships
    category_links: Mapped[list["ProductCategory"]] = relationship(
        "ProductCategory",
        back_populates="product",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ProductCategory.position",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]})>"

    @property
    def categories(self) -> list[str]:
        """Category names in the order they were given."""
        return [link.name for link in self.category_links]

    def to_dict(self) -> dict:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "quantity": self.quantity,
            "categories": self.categories,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


class ProductCategory(Base):
    """One member of a product's category set."""

    __tablename__ = "product_categories"

    product_seq: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.seq", ondelete="CASCADE"),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(String(100), primary_key=True, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="category_links")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductCategory(product_seq={self.product_seq}, name={self.name})>"


# Case-insensitive uniqueness on product names
Index("uq_products_name_lower", func.lower(Product.name), unique=True)
Index("ix_products_created_at", Product.created_at.desc())
