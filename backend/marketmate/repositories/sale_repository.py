import logging
from datetime import datetime

from sqlalchemy import exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from marketmate.db.database import transaction
from marketmate.errors import ErrorType
from marketmate.exceptions import AppException
from marketmate.models import Product, Sale
from marketmate.schemas.sale import SaleCreate

logger = logging.getLogger(__name__)


class SaleRepository:
    """Sales are append-only: list, get and create."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[Sale]:
        """Sales joined with their product's current row, newest first."""
        result = await self.session.execute(
            select(Sale)
            .options(joinedload(Sale.product, innerjoin=True))
            .order_by(Sale.created_at.desc())
        )
        return list(result.scalars().all())

    async def get(self, sale_id: str) -> Sale | None:
        return await self.session.get(Sale, sale_id)

    async def create(self, data: SaleCreate) -> Sale:
        """Record a sale and decrement the product's stock in one transaction.

        The decrement is a single conditional UPDATE, so concurrent sales of
        the same product serialize on the row and stock never drops below
        zero. unit_price and total_amount are stored exactly as submitted.

        Raises:
            AppException: VALIDATION_ERROR for a non-positive quantity or an
                unknown product, INSUFFICIENT_STOCK when stock < quantity.
        """
        if not isinstance(data.quantity, int) or data.quantity <= 0:
            raise AppException(ErrorType.VALIDATION_ERROR, "Quantity must be a positive integer")

        now = datetime.now()
        async with transaction(self.session):
            result = await self.session.execute(
                update(Product)
                .where(Product.id == data.product_id, Product.stock >= data.quantity)
                .values(stock=Product.stock - data.quantity, updated_at=now)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                found = await self.session.scalar(
                    select(exists().where(Product.id == data.product_id))
                )
                if not found:
                    raise AppException(ErrorType.VALIDATION_ERROR, "Product not found")
                raise AppException(
                    ErrorType.INSUFFICIENT_STOCK,
                    f"Insufficient stock for a sale of {data.quantity}"
                )

            sale = Sale(**data.model_dump(), created_at=now)
            self.session.add(sale)

        logger.info(f"Recorded sale {sale.id}: {sale.quantity} x product {sale.product_id}")
        return sale
