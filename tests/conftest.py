"""Pytest fixtures for storefront tests."""

from datetime import date, timedelta

import pytest

from storefront.models import Customer, Product
from storefront.services import ShippingService


class RecordingShippingService(ShippingService):
    """Shipping double that records each dispatch instead of printing."""

    def __init__(self):
        self.calls: list[list[Product]] = []

    def ship_items(self, items):
        self.calls.append(list(items))


@pytest.fixture
def today():
    return date.today()


@pytest.fixture
def plain_product():
    return Product(name="Gift Card", price=10.0, stock_quantity=5)


@pytest.fixture
def shippable_product():
    return Product(name="TV", price=300.0, stock_quantity=2, weight=10.0)


@pytest.fixture
def fresh_product(today):
    return Product(
        name="Cheese",
        price=10.0,
        stock_quantity=5,
        expiry_date=today + timedelta(days=5),
        weight=1.5,
    )


@pytest.fixture
def expired_product(today):
    return Product(
        name="Milk",
        price=2.0,
        stock_quantity=10,
        expiry_date=today - timedelta(days=1),
    )


@pytest.fixture
def customer():
    return Customer(name="John Doe", balance=1000.0)


@pytest.fixture
def shipping():
    return RecordingShippingService()
