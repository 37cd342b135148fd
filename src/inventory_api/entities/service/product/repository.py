"""Product repository: the persistence collaborator of the inventory service."""

from collections.abc import Iterable
from typing import Any

from loguru import logger
from sqlalchemy import ColumnElement, and_
from sqlmodel import Session, col, select

from src.inventory_api.entities.core._base import utc_now
from src.inventory_api.entities.service.product.entity import Product
from src.inventory_api.entities.service.product.table import ProductTable

# Fields a replace is allowed to overwrite; id and created_at are immutable.
_REPLACEABLE_FIELDS = {"name", "description", "stock_quantity", "low_stock_threshold"}


def low_stock_condition() -> ColumnElement[bool]:
    """SQL form of the low-stock predicate: threshold set and stock strictly below it."""
    return and_(
        col(ProductTable.low_stock_threshold).is_not(None),
        col(ProductTable.stock_quantity) < col(ProductTable.low_stock_threshold),
    )


class ProductRepository:
    """Data-access layer for products.

    Every write commits its own transaction, so each call is atomic for the
    single record it touches. Nothing spans more than one record.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, product_id: str) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return self._to_entity(row)

    def insert(self, product: Product) -> Product:
        """Persist a new product, stamping both timestamps."""
        now = utc_now()
        row = ProductTable(
            **product.model_dump(exclude={"created_at", "updated_at"}),
            created_at=now,
            updated_at=now,
        )
        self._commit(row)
        return self._to_entity(row)

    def replace(self, product_id: str, product: Product) -> Product | None:
        """Overwrite the mutable fields of an existing product."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None

        row.sqlmodel_update(product.model_dump(include=_REPLACEABLE_FIELDS))
        row.updated_at = utc_now()
        self._commit(row)
        return self._to_entity(row)

    def delete(self, product_id: str) -> bool:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False

        try:
            self._session.delete(row)
            self._session.commit()
        except Exception:
            self._rollback("delete", product_id)
            raise
        return True

    def find_all(self, *order_by: Any) -> list[Product]:
        statement = select(ProductTable).order_by(*order_by)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def find_where(
        self, *clauses: ColumnElement[bool], order_by: Iterable[Any] = ()
    ) -> list[Product]:
        statement = select(ProductTable).where(*clauses).order_by(*order_by)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def _commit(self, row: ProductTable) -> None:
        try:
            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        except Exception:
            self._rollback("write", row.id)
            raise

    def _rollback(self, operation: str, product_id: str) -> None:
        self._session.rollback()
        logger.bind(product_id=product_id, operation=operation).exception(
            "product.persistence_error"
        )

    @staticmethod
    def _to_entity(row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)
