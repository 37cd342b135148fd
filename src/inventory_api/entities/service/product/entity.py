"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.inventory_api.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a stock-tracked inventory item.

    Field constraints mirror the invariants a stored product satisfies.
    Stock transitions go through the stock adjustment engine, never through
    direct mutation.
    """

    name: str = Field(min_length=1, description="Product name (trimmed)")
    description: str = Field(default="", description="Free-text description")
    stock_quantity: int = Field(default=0, ge=0, description="Units in stock")
    low_stock_threshold: int | None = Field(
        default=5, ge=0, description="Stock level below which the product is low"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.stock_quantity == other.stock_quantity
            and self.low_stock_threshold == other.low_stock_threshold
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.stock_quantity,
            self.low_stock_threshold,
        ))
