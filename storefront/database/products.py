"""In-memory product catalog"""

from datetime import date, timedelta
from typing import Optional

from ..models.product import Product


def build_demo_products(today: Optional[date] = None) -> dict[str, Product]:
    """Demo catalog covering every trait combination, dated relative to today"""
    today = today or date.today()
    products = [
        # Expirable and shippable
        Product(
            name="Cheese",
            price=10.0,
            stock_quantity=5,
            expiry_date=today + timedelta(days=5),
            weight=1.5,
        ),
        # Expirable only
        Product(
            name="Biscuit",
            price=5.0,
            stock_quantity=10,
            expiry_date=today + timedelta(days=30),
        ),
        # Shippable only
        Product(
            name="TV",
            price=300.0,
            stock_quantity=2,
            weight=10.0,
        ),
        # Neither
        Product(
            name="Mobile Scratch Card",
            price=20.0,
            stock_quantity=20,
        ),
    ]
    return {p.name: p for p in products}


class ProductDatabase:
    """In-memory product database keyed by product name"""

    def __init__(self, products: Optional[dict[str, Product]] = None):
        self.products = products if products is not None else build_demo_products()

    def get_product(self, name: str) -> Optional[Product]:
        """Get a product by name"""
        return self.products.get(name)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())

    def get_available_products(self, today: Optional[date] = None) -> list[Product]:
        """Products that can currently be added to a cart"""
        return [p for p in self.products.values() if p.is_available(today)]
