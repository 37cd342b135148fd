"""Product database table model."""

from sqlmodel import Field

from src.inventory_api.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "products"

    name: str
    description: str = ""
    stock_quantity: int = Field(default=0, index=True)
    low_stock_threshold: int | None = Field(default=5, nullable=True)
