import logging
from datetime import datetime

from sqlalchemy import delete, exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketmate.db.database import transaction
from marketmate.errors import ErrorType
from marketmate.exceptions import AppException
from marketmate.models import Product, Sale
from marketmate.schemas.product import ProductCreate, ProductUpdate, StockStatus

logger = logging.getLogger(__name__)


class ProductRepository:
    """Single-table CRUD over products."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(
        self,
        search: str | None = None,
        category: str | None = None,
        stock_status: StockStatus | None = None,
    ) -> list[Product]:
        """All products, newest first, optionally filtered like the inventory page."""
        stmt = select(Product).order_by(Product.created_at.desc())

        if search:
            stmt = stmt.where(or_(
                Product.name.icontains(search, autoescape=True),
                Product.description.icontains(search, autoescape=True),
            ))
        if category and category != "all":
            stmt = stmt.where(Product.category == category)
        if stock_status == StockStatus.IN_STOCK:
            stmt = stmt.where(Product.stock > Product.low_stock_threshold)
        elif stock_status == StockStatus.LOW_STOCK:
            stmt = stmt.where(Product.stock <= Product.low_stock_threshold, Product.stock > 0)
        elif stock_status == StockStatus.OUT_OF_STOCK:
            stmt = stmt.where(Product.stock == 0)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, product_id: str) -> Product | None:
        return await self.session.get(Product, product_id)

    async def create(self, data: ProductCreate) -> Product:
        now = datetime.now()
        product = Product(**data.model_dump(), created_at=now, updated_at=now)
        async with transaction(self.session):
            self.session.add(product)
        return product

    async def update(self, product_id: str, data: ProductUpdate) -> Product | None:
        """Apply the fields that were set; None when the product does not exist."""
        async with transaction(self.session):
            product = await self.session.get(Product, product_id)
            if product is None:
                return None
            for field, value in data.changes().items():
                setattr(product, field, value)
            product.updated_at = datetime.now()
        return product

    async def delete(self, product_id: str) -> bool:
        """Delete a product.

        Returns False when the id does not resolve. Products that sales still
        reference are never deleted (AppException PRODUCT_IN_USE).
        """
        async with transaction(self.session):
            referenced = await self.session.scalar(
                select(exists().where(Sale.product_id == product_id))
            )
            if referenced:
                raise AppException(
                    ErrorType.PRODUCT_IN_USE,
                    "Product has recorded sales and cannot be deleted"
                )
            result = await self.session.execute(
                delete(Product).where(Product.id == product_id)
            )
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted product {product_id}")
        return deleted
