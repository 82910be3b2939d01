# Database modules

from .products import ProductDatabase, build_demo_products

__all__ = [
    "ProductDatabase",
    "build_demo_products",
]
