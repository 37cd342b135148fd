"""Tests for the product entity, table model and repository."""

from datetime import datetime

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import OperationalError
from sqlmodel import col, select

from src.inventory_api.entities.core._base import generate_object_id
from src.inventory_api.entities.service.product import (
    Product,
    ProductRepository,
    ProductTable,
    low_stock_condition,
)


class TestProductEntity:
    """Test Product domain entity."""

    def test_product_creation(self):
        """Test creating a product with defaults."""
        product = Product(name="Widget")

        assert product.name == "Widget"
        assert product.description == ""
        assert product.stock_quantity == 0
        assert product.low_stock_threshold == 5
        assert len(product.id) == 24
        assert isinstance(product.created_at, datetime)

    def test_generated_ids_are_unique_hex(self):
        ids = {generate_object_id() for _ in range(100)}

        assert len(ids) == 100
        assert all(len(i) == 24 and int(i, 16) >= 0 for i in ids)

    @pytest.mark.parametrize(
        "fields",
        [
            {"name": ""},
            {"name": "Widget", "stock_quantity": -1},
            {"name": "Widget", "low_stock_threshold": -1},
        ],
    )
    def test_invalid_products_are_rejected(self, fields):
        with pytest.raises(ValidationError):
            Product(**fields)

    def test_product_equality_ignores_timestamps(self):
        """Test product equality comparison."""
        product = Product(name="Widget", stock_quantity=3)
        later = product.model_copy(update={"updated_at": datetime(2030, 1, 1)})
        restocked = product.model_copy(update={"stock_quantity": 4})

        assert product == later
        assert hash(product) == hash(later)
        assert product != restocked
        assert product != "Widget"


class TestProductTable:
    """Test ProductTable database model."""

    def test_table_round_trip(self, session):
        row = ProductTable(name="Widget", stock_quantity=2, low_stock_threshold=None)
        session.add(row)
        session.commit()

        stored = session.exec(select(ProductTable)).one()
        assert stored.name == "Widget"
        assert stored.description == ""
        assert stored.stock_quantity == 2
        assert stored.low_stock_threshold is None
        assert len(stored.id) == 24

    def test_low_stock_condition(self, session):
        session.add_all(
            [
                ProductTable(name="low", stock_quantity=1, low_stock_threshold=5),
                ProductTable(name="at", stock_quantity=5, low_stock_threshold=5),
                ProductTable(name="null", stock_quantity=0, low_stock_threshold=None),
            ]
        )
        session.commit()

        names = session.exec(select(ProductTable.name).where(low_stock_condition())).all()
        assert names == ["low"]


class TestProductRepository:
    """Test ProductRepository operations."""

    def test_insert_and_find(self, product_repository):
        product = Product(name="Widget", stock_quantity=3)

        created = product_repository.insert(product)

        assert created == product
        assert created.created_at == created.updated_at
        assert product_repository.find_by_id(product.id) == product

    def test_find_missing(self, product_repository):
        assert product_repository.find_by_id(generate_object_id()) is None

    def test_replace_overwrites_mutable_fields(self, product_repository, ticking_clock):
        created = product_repository.insert(Product(name="Widget", stock_quantity=3))

        replaced = product_repository.replace(
            created.id,
            created.model_copy(update={"name": "Gadget", "stock_quantity": 9}),
        )

        assert replaced is not None
        assert replaced.name == "Gadget"
        assert replaced.stock_quantity == 9
        assert replaced.created_at == created.created_at
        assert replaced.updated_at > created.updated_at

    def test_replace_keeps_id_and_created_at(self, product_repository):
        created = product_repository.insert(Product(name="Widget"))
        impostor = Product(name="Other", created_at=datetime(2000, 1, 1))

        replaced = product_repository.replace(created.id, impostor)

        assert replaced.id == created.id
        assert replaced.name == "Other"
        assert replaced.created_at == created.created_at

    def test_replace_missing(self, product_repository):
        assert product_repository.replace(generate_object_id(), Product(name="x")) is None

    def test_delete(self, product_repository):
        created = product_repository.insert(Product(name="Widget"))

        assert product_repository.delete(created.id) is True
        assert product_repository.delete(created.id) is False
        assert product_repository.find_by_id(created.id) is None

    def test_find_all_ordering(self, product_repository, ticking_clock):
        first = product_repository.insert(Product(name="First"))
        second = product_repository.insert(Product(name="Second"))

        newest_first = product_repository.find_all(col(ProductTable.created_at).desc())

        assert [p.id for p in newest_first] == [second.id, first.id]

    def test_find_where(self, product_repository):
        product_repository.insert(Product(name="Low", stock_quantity=1))
        product_repository.insert(Product(name="Plenty", stock_quantity=50))

        found = product_repository.find_where(
            col(ProductTable.stock_quantity) > 10,
            order_by=(col(ProductTable.name).asc(),),
        )

        assert [p.name for p in found] == ["Plenty"]

    def test_failed_write_rolls_back_and_propagates(self, session, monkeypatch):
        repository = ProductRepository(session)
        rollbacks = []

        def failing_commit():
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        monkeypatch.setattr(session, "commit", failing_commit)
        monkeypatch.setattr(session, "rollback", lambda: rollbacks.append(True))

        with pytest.raises(OperationalError):
            repository.insert(Product(name="Widget"))

        assert rollbacks == [True]

    def test_driver_error_rolls_back_and_leaves_session_usable(self, product_repository):
        with pytest.raises(OverflowError):
            product_repository.insert(Product(name="Huge", stock_quantity=2**63))

        assert product_repository.find_all() == []
        assert product_repository.insert(Product(name="Widget")).name == "Widget"
