#!/usr/bin/env python3
"""Seed product inventory script.

Creates the database schema and inserts the default categories and
sample products. Safe to run repeatedly: tables that already hold data
are left untouched.

Usage:
    python scripts/seed_inventory.py
    python scripts/seed_inventory.py --products-only
    python scripts/seed_inventory.py --skip-create-tables
"""

import argparse
import asyncio

from inventory_api.catalog.service import get_inventory_service
from inventory_api.infrastructure.database import create_tables, dispose_engine
from inventory_api.infrastructure.logging_config import configure_logging


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed default categories and products",
    )
    parser.add_argument(
        "--products-only",
        action="store_true",
        help="Seed products only, against categories already in the database",
    )
    parser.add_argument(
        "--skip-create-tables",
        action="store_true",
        help="Don't create tables before seeding (schema managed by alembic)",
    )

    args = parser.parse_args()
    configure_logging(json_output=False)

    print("=" * 60)
    print("Product Inventory Seeder")
    print("=" * 60)

    try:
        if not args.skip_create_tables:
            print("Creating database tables...")
            await create_tables()
            print("Tables ready.")
            print()

        service = get_inventory_service()
        if args.products_only:
            result = await service.seed_products()
        else:
            result = await service.seed()

        if result.seeded:
            print(f"  ✓ Categories created: {result.categories_created}")
            print(f"  ✓ Products created: {result.products_created}")
        else:
            print("  ✓ Already seeded, nothing to do")
        for name in result.skipped_products:
            print(f"  ✗ Skipped (no known category): {name}")
    finally:
        await dispose_engine()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
