from marketmate.models.product import Product
from marketmate.models.sale import Sale

__all__ = ["Product", "Sale"]
