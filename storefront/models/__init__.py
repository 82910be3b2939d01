# Storefront Models

from .product import Product
from .cart import Cart, CartItem
from .customer import Customer
from .checkout import CheckoutStatus, CheckoutResponse

__all__ = [
    "Product",
    "Cart",
    "CartItem",
    "Customer",
    "CheckoutStatus",
    "CheckoutResponse",
]
