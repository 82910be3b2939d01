"""Tests for Cart."""

import pytest

from storefront.core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ProductUnavailableError,
)
from storefront.models import Cart, Product


@pytest.fixture
def cart():
    return Cart()


class TestAddProduct:
    def test_new_line(self, cart, plain_product):
        item = cart.add_product(plain_product, 3)

        assert not cart.is_empty()
        assert item.quantity == 3
        assert cart.get_item("Gift Card") is item

    def test_line_references_product(self, cart, plain_product):
        cart.add_product(plain_product, 1)

        assert cart.get_item("Gift Card").product is plain_product

    def test_repeated_add_merges(self, cart, plain_product):
        cart.add_product(plain_product, 2)
        cart.add_product(plain_product, 3)

        assert len(cart.items) == 1
        assert cart.get_item("Gift Card").quantity == 5

    def test_total_price(self, cart, plain_product):
        cart.add_product(plain_product, 3)

        assert cart.get_item("Gift Card").total_price == 30.0

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, cart, plain_product, quantity):
        with pytest.raises(InvalidQuantityError):
            cart.add_product(plain_product, quantity)

        assert cart.is_empty()

    def test_expired_product_rejected(self, cart, expired_product):
        with pytest.raises(ProductUnavailableError) as exc_info:
            cart.add_product(expired_product, 1)

        assert exc_info.value.product_name == "Milk"
        assert cart.is_empty()

    def test_out_of_stock_product_rejected(self, cart):
        product = Product(name="Lamp", price=15.0, stock_quantity=0)

        with pytest.raises(ProductUnavailableError):
            cart.add_product(product, 1)

    def test_quantity_above_stock_rejected(self, cart, plain_product):
        with pytest.raises(InsufficientStockError) as exc_info:
            cart.add_product(plain_product, 6)

        assert exc_info.value.requested == 6
        assert exc_info.value.available == 5
        assert cart.is_empty()

    def test_combined_quantity_above_stock_rejected(self, cart, plain_product):
        cart.add_product(plain_product, 3)

        with pytest.raises(InsufficientStockError, match="Total quantity exceeds stock"):
            cart.add_product(plain_product, 3)

        assert cart.get_item("Gift Card").quantity == 3

    def test_combined_quantity_checked_against_current_stock(self, cart, plain_product):
        cart.add_product(plain_product, 2)
        plain_product.reduce_quantity(2)

        with pytest.raises(InsufficientStockError):
            cart.add_product(plain_product, 2)

        cart.add_product(plain_product, 1)
        assert cart.get_item("Gift Card").quantity == 3


class TestCartState:
    def test_new_cart_is_empty(self, cart):
        assert cart.is_empty()
        assert cart.items == []

    def test_clear(self, cart, plain_product, shippable_product):
        cart.add_product(plain_product, 1)
        cart.add_product(shippable_product, 1)

        cart.clear()

        assert cart.is_empty()
        assert cart.get_item("TV") is None
