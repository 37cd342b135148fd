"""Unit tests for the stock adjustment engine and low-stock predicate."""

import pytest

from src.inventory_api.core.services.inventory import stock
from src.inventory_api.core.services.inventory.errors import (
    InsufficientStockError,
    InvalidInputError,
)
from src.inventory_api.core.services.inventory.validation import MAX_STOCK_LEVEL
from src.inventory_api.entities.service.product import Product


def _product(stock_quantity: int = 10, low_stock_threshold: int | None = 5) -> Product:
    return Product(
        name="Widget",
        stock_quantity=stock_quantity,
        low_stock_threshold=low_stock_threshold,
    )


class TestIncrease:
    def test_adds_quantity(self):
        product = _product(stock_quantity=10)

        increased = stock.increase(product, 5)

        assert increased.stock_quantity == 15
        assert increased.id == product.id
        assert increased.name == product.name

    def test_does_not_mutate_input(self):
        product = _product(stock_quantity=10)

        stock.increase(product, 5)

        assert product.stock_quantity == 10

    def test_cannot_exceed_maximum_stock_level(self):
        product = _product(stock_quantity=MAX_STOCK_LEVEL - 1)

        assert stock.increase(product, 1).stock_quantity == MAX_STOCK_LEVEL
        with pytest.raises(InvalidInputError):
            stock.increase(product, 2)


class TestDecrease:
    def test_removes_quantity(self):
        assert stock.decrease(_product(stock_quantity=10), 3).stock_quantity == 7

    def test_can_reach_exactly_zero(self):
        assert stock.decrease(_product(stock_quantity=4), 4).stock_quantity == 0

    def test_insufficient_stock_raises_and_leaves_product_unchanged(self):
        product = _product(stock_quantity=10)

        with pytest.raises(InsufficientStockError) as exc_info:
            stock.decrease(product, 11)

        assert exc_info.value.message == "Insufficient stock"
        assert exc_info.value.available == 10
        assert exc_info.value.requested == 11
        assert product.stock_quantity == 10

    @pytest.mark.parametrize(("start", "quantity"), [(0, 1), (3, 3), (10, 7), (100, 1)])
    def test_increase_then_decrease_restores_stock(self, start, quantity):
        product = _product(stock_quantity=start)

        restored = stock.decrease(stock.increase(product, quantity), quantity)

        assert restored == product


class TestIsLowStock:
    @pytest.mark.parametrize(
        ("stock_quantity", "threshold", "expected"),
        [
            (2, 5, True),
            (4, 5, True),
            (5, 5, False),
            (6, 5, False),
            (0, 0, False),
            (0, 1, True),
            (0, None, False),
            (100, None, False),
        ],
    )
    def test_strictly_below_non_null_threshold(self, stock_quantity, threshold, expected):
        product = _product(stock_quantity=stock_quantity, low_stock_threshold=threshold)

        assert stock.is_low_stock(product) is expected
