from datetime import datetime, time, timedelta
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketmate.models import Product, Sale
from marketmate.schemas.common import CENT
from marketmate.schemas.dashboard import DashboardStats


def day_window(now: datetime) -> tuple[datetime, datetime]:
    """Local midnight today and local midnight tomorrow."""
    start = datetime.combine(now.date(), time.min)
    return start, start + timedelta(days=1)


def month_start(now: datetime) -> datetime:
    return datetime.combine(now.date().replace(day=1), time.min)


class DashboardService:
    """Aggregates computed on demand over products and sales."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_stats(self, now: datetime | None = None) -> DashboardStats:
        now = now or datetime.now()
        today_start, tomorrow_start = day_window(now)

        total_products = await self.session.scalar(
            select(func.count()).select_from(Product)
        )
        low_stock_items = await self.session.scalar(
            select(func.count())
            .select_from(Product)
            .where(Product.stock <= Product.low_stock_threshold)
        )
        today_sales = await self._sum_sales(today_start, tomorrow_start)
        monthly_sales = await self._sum_sales(month_start(now))

        return DashboardStats(
            total_products=total_products or 0,
            low_stock_items=low_stock_items or 0,
            today_sales=today_sales,
            monthly_sales=monthly_sales,
        )

    async def _sum_sales(self, start: datetime, end: datetime | None = None) -> Decimal:
        stmt = select(func.coalesce(func.sum(Sale.total_amount), 0)).where(Sale.created_at >= start)
        if end is not None:
            stmt = stmt.where(Sale.created_at < end)
        total = await self.session.scalar(stmt)
        return Decimal(str(total or 0)).quantize(CENT)
