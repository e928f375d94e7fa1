from decimal import Decimal

from marketmate.db.database import Database
from marketmate.repositories import ProductRepository
from marketmate.schemas.product import ProductCreate
from marketmate.schemas.sale import SaleCreate


def product_data(**overrides) -> ProductCreate:
    fields = {
        "name": "Cable",
        "category": "Accessories",
        "price": Decimal("5200.00"),
        "stock": 2,
        "low_stock_threshold": 5,
    }
    fields.update(overrides)
    return ProductCreate(**fields)


def sale_data(product, quantity: int = 1, **overrides) -> SaleCreate:
    fields = {
        "product_id": product.id,
        "quantity": quantity,
        "unit_price": product.price,
        "total_amount": product.price * quantity,
        "payment_method": "cash",
    }
    fields.update(overrides)
    return SaleCreate(**fields)


async def create_product(database: Database, **overrides):
    async with database.session() as s:
        return await ProductRepository(s).create(product_data(**overrides))


async def fetch_product(database: Database, product_id: str):
    """Read a product through a new session so no cached state is involved."""
    async with database.session() as s:
        return await ProductRepository(s).get(product_id)
