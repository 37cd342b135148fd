from collections.abc import Mapping
from typing import Any

from loguru import logger
from sqlmodel import col

from src.inventory_api.core.services.inventory import stock
from src.inventory_api.core.services.inventory.errors import (
    InsufficientStockError,
    ProductNotFoundError,
)
from src.inventory_api.core.services.inventory.validation import (
    ProductCreate,
    ProductUpdate,
    StockAdjustment,
    parse_input,
    validate_identifier,
)
from src.inventory_api.entities.service.product import (
    Product,
    ProductRepository,
    ProductTable,
    low_stock_condition,
)


class InventoryService:
    """Inventory use cases on top of a product repository.

    Every field is validated before the repository is touched. Stock
    adjustments are a read, a pure transition and a write; nothing guards the
    gap between the read and the write, so concurrent adjustments of the same
    product are last-writer-wins.
    """

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def create_product(self, fields: Mapping[str, Any]) -> Product:
        product = Product(**parse_input(ProductCreate, fields).model_dump())
        created = self._repository.insert(product)
        logger.bind(product_id=created.id).info("product.created")
        return created

    def get_product(self, product_id: str) -> Product:
        return self._require(validate_identifier(product_id))

    def list_products(self) -> list[Product]:
        """Return all products, newest first."""
        return self._repository.find_all(col(ProductTable.created_at).desc())

    def update_product(self, product_id: str, fields: Mapping[str, Any]) -> Product:
        """Apply a partial update; a single invalid field rejects the whole update."""
        product_id = validate_identifier(product_id)
        changes = parse_input(ProductUpdate, fields).changes()

        current = self._require(product_id)
        updated = self._repository.replace(
            product_id, current.model_copy(update=changes)
        )
        if updated is None:
            raise ProductNotFoundError(product_id)

        logger.bind(product_id=product_id, fields=sorted(changes)).info(
            "product.updated"
        )
        return updated

    def delete_product(self, product_id: str) -> None:
        product_id = validate_identifier(product_id)
        if not self._repository.delete(product_id):
            raise ProductNotFoundError(product_id)
        logger.bind(product_id=product_id).info("product.deleted")

    def increase_stock(self, product_id: str, quantity: Any) -> Product:
        product_id = validate_identifier(product_id)
        amount = self._adjustment(quantity)

        current = self._require(product_id)
        updated = self._save(stock.increase(current, amount))
        logger.bind(
            product_id=product_id, quantity=amount, stock=updated.stock_quantity
        ).info("stock.increased")
        return updated

    def decrease_stock(self, product_id: str, quantity: Any) -> Product:
        product_id = validate_identifier(product_id)
        amount = self._adjustment(quantity)

        current = self._require(product_id)
        try:
            adjusted = stock.decrease(current, amount)
        except InsufficientStockError as exc:
            logger.bind(
                product_id=product_id, available=exc.available, requested=exc.requested
            ).warning("stock.insufficient")
            raise

        updated = self._save(adjusted)
        logger.bind(
            product_id=product_id, quantity=amount, stock=updated.stock_quantity
        ).info("stock.decreased")
        return updated

    def list_low_stock(self) -> list[Product]:
        """Return low-stock products, most depleted first."""
        candidates = self._repository.find_where(
            low_stock_condition(),
            order_by=(col(ProductTable.stock_quantity).asc(),),
        )
        return [product for product in candidates if stock.is_low_stock(product)]

    def _require(self, product_id: str) -> Product:
        product = self._repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def _save(self, product: Product) -> Product:
        saved = self._repository.replace(product.id, product)
        if saved is None:
            raise ProductNotFoundError(product.id)
        return saved

    @staticmethod
    def _adjustment(quantity: Any) -> int:
        return parse_input(StockAdjustment, {"quantity": quantity}).quantity
