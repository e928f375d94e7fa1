import pytest
from datetime import datetime, timedelta
from decimal import Decimal

from marketmate.models import Sale
from marketmate.services.dashboard_service import DashboardService
from tests.integration.helpers import create_product

NOW = datetime(2026, 10, 19, 14, 0)


async def add_sale(database, product, amount: str, created_at: datetime):
    async with database.session() as s:
        s.add(Sale(
            product_id=product.id,
            quantity=1,
            unit_price=Decimal(amount),
            total_amount=Decimal(amount),
            payment_method="cash",
            created_at=created_at,
        ))
        await s.commit()


async def stats(database, now=NOW):
    async with database.session() as s:
        return await DashboardService(s).get_stats(now=now)


class TestDashboardStats:

    @pytest.mark.asyncio
    async def test_empty_store(self, database):
        result = await stats(database)

        assert result.total_products == 0
        assert result.low_stock_items == 0
        assert result.today_sales == Decimal("0.00")
        assert result.monthly_sales == Decimal("0.00")

    @pytest.mark.asyncio
    async def test_low_stock_boundary_is_inclusive(self, database):
        await create_product(database, name="At threshold", stock=5, low_stock_threshold=5)
        await create_product(database, name="Below", stock=1, low_stock_threshold=5)
        await create_product(database, name="Empty", stock=0, low_stock_threshold=0)
        await create_product(database, name="Above", stock=6, low_stock_threshold=5)

        result = await stats(database)

        assert result.total_products == 4
        assert result.low_stock_items == 3

    @pytest.mark.asyncio
    async def test_today_excludes_yesterday_and_tomorrow(self, database):
        product = await create_product(database, stock=50)
        await add_sale(database, product, "100.00", NOW.replace(hour=0, minute=0))
        await add_sale(database, product, "25.50", NOW.replace(hour=23, minute=59, second=59))
        await add_sale(database, product, "999.00", NOW.replace(hour=0, minute=0) - timedelta(microseconds=1))
        await add_sale(database, product, "777.00", NOW - timedelta(days=1))

        result = await stats(database)

        assert result.today_sales == Decimal("125.50")

    @pytest.mark.asyncio
    async def test_month_starts_on_the_first(self, database):
        product = await create_product(database, stock=50)
        await add_sale(database, product, "10.00", datetime(2026, 10, 1, 0, 0))
        await add_sale(database, product, "20.00", datetime(2026, 10, 18, 9, 15))
        await add_sale(database, product, "30.00", NOW)
        await add_sale(database, product, "40.00", datetime(2026, 9, 30, 23, 59, 59))

        result = await stats(database)

        assert result.monthly_sales == Decimal("60.00")
        assert result.today_sales == Decimal("30.00")
