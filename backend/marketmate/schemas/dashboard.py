from decimal import Decimal

from marketmate.schemas.common import CamelModel


class DashboardStats(CamelModel):
    total_products: int
    low_stock_items: int
    today_sales: Decimal
    monthly_sales: Decimal
