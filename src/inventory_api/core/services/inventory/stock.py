"""Stock adjustment engine and low-stock predicate.

Pure functions over Product values: they never touch persistence and never
mutate their input. Quantities are expected to be validated positive integers.
"""

from src.inventory_api.core.services.inventory.errors import (
    InsufficientStockError,
    InvalidInputError,
)
from src.inventory_api.core.services.inventory.validation import MAX_STOCK_LEVEL
from src.inventory_api.entities.service.product import Product


def increase(product: Product, quantity: int) -> Product:
    """Return a copy of ``product`` with ``quantity`` units added.

    Raises:
        InvalidInputError: if the result would exceed ``MAX_STOCK_LEVEL``.
    """
    total = product.stock_quantity + quantity
    if total > MAX_STOCK_LEVEL:
        raise InvalidInputError("quantity", "quantity exceeds the maximum stock level")
    return product.model_copy(update={"stock_quantity": total})


def decrease(product: Product, quantity: int) -> Product:
    """Return a copy of ``product`` with ``quantity`` units removed.

    Raises:
        InsufficientStockError: if the result would be negative. ``product``
            is left untouched.
    """
    remaining = product.stock_quantity - quantity
    if remaining < 0:
        raise InsufficientStockError(product.id, product.stock_quantity, quantity)
    return product.model_copy(update={"stock_quantity": remaining})


def is_low_stock(product: Product) -> bool:
    """A product is low on stock when it is strictly below a non-null threshold."""
    return (
        product.low_stock_threshold is not None
        and product.stock_quantity < product.low_stock_threshold
    )
