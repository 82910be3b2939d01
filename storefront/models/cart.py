"""Cart models for the storefront"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from .product import Product
from ..core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ProductUnavailableError,
)

logger = logging.getLogger(__name__)


class CartItem(BaseModel):
    """Item in a shopping cart"""
    product: Product
    quantity: int = Field(gt=0)

    @property
    def total_price(self) -> float:
        return self.product.price * self.quantity


class Cart(BaseModel):
    """Shopping cart keyed by product name"""
    lines: dict[str, CartItem] = Field(default_factory=dict)

    @property
    def items(self) -> list[CartItem]:
        """All cart lines, in insertion order"""
        return list(self.lines.values())

    def get_item(self, product_name: str) -> Optional[CartItem]:
        """Get the cart line for a product name"""
        return self.lines.get(product_name)

    def add_product(self, product: Product, quantity: int) -> CartItem:
        """
        Add a quantity of a product to the cart.

        Stock is checked against the product's current quantity. Adding a
        product that is already in the cart merges into the existing line,
        and the combined quantity must still fit the stock.

        Raises:
            InvalidQuantityError: quantity is not positive
            ProductUnavailableError: product is out of stock or expired
            InsufficientStockError: quantity (or combined quantity) exceeds stock
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        if not product.is_available():
            raise ProductUnavailableError(product.name)
        if quantity > product.stock_quantity:
            raise InsufficientStockError(
                product.name,
                requested=quantity,
                available=product.stock_quantity,
            )

        existing_item = self.lines.get(product.name)
        if existing_item:
            new_quantity = existing_item.quantity + quantity
            if new_quantity > product.stock_quantity:
                raise InsufficientStockError(
                    product.name,
                    requested=new_quantity,
                    available=product.stock_quantity,
                    message=f"Total quantity exceeds stock for {product.name}",
                )
            existing_item.quantity = new_quantity
            logger.debug(f"Cart line {product.name} updated to {new_quantity}")
            return existing_item

        cart_item = CartItem(product=product, quantity=quantity)
        self.lines[product.name] = cart_item
        logger.debug(f"Added {quantity}x {product.name} to cart")
        return cart_item

    def is_empty(self) -> bool:
        return not self.lines

    def clear(self) -> None:
        """Remove all items from the cart"""
        self.lines.clear()
