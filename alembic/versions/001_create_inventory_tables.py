"""Create categories, products and product_categories tables.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create inventory tables and their indexes."""
    # Categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.UniqueConstraint('name', name='uq_categories_name'),
    )

    # Products table
    op.create_table(
        'products',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.UniqueConstraint('id', name='uq_products_id'),
    )

    # Case-insensitive unique product names
    op.create_index(
        'uq_products_name_lower',
        'products',
        [sa.text('lower(name)')],
        unique=True,
    )
    op.create_index(
        'ix_products_created_at',
        'products',
        [sa.text('created_at DESC')],
    )

    # Product category set
    op.create_table(
        'product_categories',
        sa.Column('product_seq', sa.Integer(),
                  sa.ForeignKey('products.seq', ondelete='CASCADE'), primary_key=True),
        sa.Column('name', sa.String(100), primary_key=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('ix_product_categories_name', 'product_categories', ['name'])


def downgrade() -> None:
    """Drop inventory tables."""
    op.drop_index('ix_product_categories_name', table_name='product_categories')
    op.drop_table('product_categories')
    op.drop_index('ix_products_created_at', table_name='products')
    op.drop_index('uq_products_name_lower', table_name='products')
    op.drop_table('products')
    op.drop_table('categories')
