"""Storefront exceptions"""

from typing import Optional


class StorefrontError(Exception):
    """Base exception for storefront errors"""
    pass


class InvalidArgumentError(StorefrontError, ValueError):
    """An operation was given a value it cannot accept"""

    def __init__(self, message: str, product_name: Optional[str] = None):
        self.product_name = product_name
        super().__init__(message)


class InvalidQuantityError(InvalidArgumentError):
    """Requested quantity is zero or negative"""

    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__("Quantity must be positive.")


class ProductUnavailableError(InvalidArgumentError):
    """Product is out of stock or expired"""

    def __init__(self, product_name: str):
        super().__init__(f"Product {product_name} is not available.", product_name)


class InsufficientStockError(InvalidArgumentError):
    """Requested quantity exceeds the stock on hand"""

    def __init__(self, product_name: str, requested: int, available: int, message: Optional[str] = None):
        self.requested = requested
        self.available = available
        super().__init__(
            message or f"Not enough stock for product {product_name}",
            product_name,
        )


class InsufficientBalanceError(InvalidArgumentError):
    """Debit amount exceeds the customer balance"""

    def __init__(self, amount: float, balance: float):
        self.amount = amount
        self.balance = balance
        super().__init__("Insufficient balance.")
