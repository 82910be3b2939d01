"""Checkout models for the storefront"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class CheckoutStatus(str, Enum):
    COMPLETED = "completed"
    EMPTY_CART = "empty_cart"
    OUT_OF_STOCK = "out_of_stock"
    EXPIRED = "expired"
    INSUFFICIENT_BALANCE = "insufficient_balance"


class CheckoutResponse(BaseModel):
    """Outcome of a checkout attempt"""
    success: bool
    status: CheckoutStatus
    subtotal: float = 0.0
    shipping_fees: float = 0.0
    paid_amount: float = 0.0
    new_balance: Optional[float] = None
    product_name: Optional[str] = None
    error_message: Optional[str] = None
    shipped_items: list[str] = []
