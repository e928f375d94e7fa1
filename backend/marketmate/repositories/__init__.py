from marketmate.repositories.product_repository import ProductRepository
from marketmate.repositories.sale_repository import SaleRepository

__all__ = ["ProductRepository", "SaleRepository"]
