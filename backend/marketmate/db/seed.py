import asyncio
import logging
from decimal import Decimal

from sqlalchemy import select

from marketmate.db.database import Database, transaction
from marketmate.models import Product

logger = logging.getLogger(__name__)


# Sample products: (name, description, category, price, stock, low_stock_threshold)
PRODUCTS_DATA = [
    (
        "Wireless Headphones",
        "High-quality wireless headphones with noise cancellation and premium sound quality.",
        "Electronics", Decimal("45999.99"), 25, 10,
    ),
    (
        "Gaming Mouse",
        "Precision gaming mouse with RGB lighting and customizable buttons for competitive gaming.",
        "Electronics", Decimal("18250.00"), 3, 5,
    ),
    (
        "Bluetooth Speaker",
        "Portable wireless speaker with 360-degree sound and waterproof design.",
        "Electronics", Decimal("52000.00"), 15, 10,
    ),
    (
        "USB Cable Type-C",
        "High-speed USB-C cable for fast charging and data transfer.",
        "Accessories", Decimal("5200.00"), 2, 5,
    ),
]


async def seed_database(database: Database) -> bool:
    """Insert the sample catalogue if the products table is empty.

    Returns True when rows were inserted.
    """
    async with database.session() as session:
        # Check if data exists
        result = await session.execute(select(Product.id).limit(1))
        if result.scalar():
            logger.info("Database already seeded")
            return False

        async with transaction(session):
            for name, description, category, price, stock, threshold in PRODUCTS_DATA:
                session.add(Product(
                    name=name,
                    description=description,
                    category=category,
                    price=price,
                    stock=stock,
                    low_stock_threshold=threshold,
                ))

    logger.info(f"Seeded {len(PRODUCTS_DATA)} sample products")
    return True


async def seed_sample_data(database: Database) -> None:
    """Best-effort startup seeding: failures are logged, never raised."""
    try:
        await seed_database(database)
    except Exception as e:
        logger.warning(f"Sample data initialization skipped or failed: {e}")


async def main():
    database = Database()
    await database.create_tables()
    try:
        await seed_database(database)
    finally:
        await database.disconnect()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
