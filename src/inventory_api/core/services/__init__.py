"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Inventory Services
from .inventory import (
    InsufficientStockError,
    InvalidInputError,
    InventoryError,
    InventoryService,
    ProductNotFoundError,
)

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Inventory Services
    "InventoryService",
    "InventoryError",
    "InvalidInputError",
    "ProductNotFoundError",
    "InsufficientStockError",
]
