"""Entity package: Product."""

from .entity import Product
from .repository import ProductRepository, low_stock_condition
from .table import ProductTable

__all__ = ["Product", "ProductRepository", "ProductTable", "low_stock_condition"]
