# Core configuration and errors

from .config import Settings, get_settings, settings, SHIPPING_FEE_PER_KG
from .exceptions import (
    StorefrontError,
    InvalidArgumentError,
    InvalidQuantityError,
    ProductUnavailableError,
    InsufficientStockError,
    InsufficientBalanceError,
)

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "SHIPPING_FEE_PER_KG",
    "StorefrontError",
    "InvalidArgumentError",
    "InvalidQuantityError",
    "ProductUnavailableError",
    "InsufficientStockError",
    "InsufficientBalanceError",
]
