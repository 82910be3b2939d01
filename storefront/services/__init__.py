# Storefront Services

from .shipping import ShippingService, ConsoleShippingService
from .checkout import Order

__all__ = [
    "ShippingService",
    "ConsoleShippingService",
    "Order",
]
