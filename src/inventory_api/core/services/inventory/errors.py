"""Inventory domain errors.

Each error carries the HTTP status the transport layer reports it with, so the
routers never have to translate domain failures by hand.
"""


class InventoryError(Exception):
    """Base class for client-caused inventory failures."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(InventoryError):
    """A field failed a validation rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ProductNotFoundError(InventoryError):
    """A well-formed product id resolved to no record."""

    status_code = 404

    def __init__(self, product_id: str) -> None:
        super().__init__("Product not found")
        self.product_id = product_id


class InsufficientStockError(InventoryError):
    """A decrease would drive stock below zero."""

    def __init__(self, product_id: str, available: int, requested: int) -> None:
        super().__init__("Insufficient stock")
        self.product_id = product_id
        self.available = available
        self.requested = requested
