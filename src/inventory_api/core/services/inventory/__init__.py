"""Inventory domain: validation, stock transitions and the use-case service."""

from .errors import (
    InsufficientStockError,
    InvalidInputError,
    InventoryError,
    ProductNotFoundError,
)
from .inventory_service import InventoryService

__all__ = [
    "InventoryService",
    "InventoryError",
    "InvalidInputError",
    "ProductNotFoundError",
    "InsufficientStockError",
]
