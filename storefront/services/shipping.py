"""
Shipping services

Checkout hands the shipping collaborator one entry per shippable unit, so
three units of the same product arrive as three entries. Any object with a
``ship_items`` method can stand in for the console implementation.
"""

import logging

from ..models.product import Product

logger = logging.getLogger(__name__)


class ShippingService:
    """Base class for shipping collaborators"""

    def ship_items(self, items: list[Product]) -> None:
        raise NotImplementedError


class ConsoleShippingService(ShippingService):
    """Simulated dispatch that prints one line per shipped unit"""

    def ship_items(self, items: list[Product]) -> None:
        print("Shipping Items:")
        for item in items:
            print(f" - {item.name}, weight: {item.weight} kg")

        total_weight = sum(item.weight for item in items)
        logger.info(f"Dispatched {len(items)} unit(s), total weight {total_weight} kg")
