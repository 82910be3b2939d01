"""
Storefront Checkout Demo

Runs a fixed shopping scenario: a customer fills a cart with one product of
every trait combination and checks out against the console shipping service.
"""

import logging
from typing import Optional

from dotenv import load_dotenv

from .core.config import Settings, get_settings
from .core.exceptions import InvalidArgumentError
from .database.products import ProductDatabase
from .models.checkout import CheckoutResponse
from .models.customer import Customer
from .services.checkout import Order
from .services.shipping import ConsoleShippingService, ShippingService

logger = logging.getLogger(__name__)

DEMO_CART = [
    ("Cheese", 3),
    ("Biscuit", 5),
    ("TV", 1),
    ("Mobile Scratch Card", 5),
]


def configure_logging(config: Settings) -> None:
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_demo(
    config: Optional[Settings] = None,
    product_db: Optional[ProductDatabase] = None,
    shipping_service: Optional[ShippingService] = None,
) -> CheckoutResponse:
    """Fill the demo cart and check it out"""
    config = config or get_settings()
    product_db = product_db or ProductDatabase()
    shipping_service = shipping_service or ConsoleShippingService()

    customer = Customer(
        name=config.demo_customer_name,
        balance=config.demo_customer_balance,
    )
    logger.info(f"{config.app_name}: {customer.name} starts with balance {customer.balance:.2f}")

    for product_name, quantity in DEMO_CART:
        product = product_db.get_product(product_name)
        if product is None:
            logger.error(f"Product {product_name} not found in catalog")
            continue
        try:
            customer.cart.add_product(product, quantity)
        except InvalidArgumentError as e:
            logger.error(f"Add to cart error: {e}")

    order = Order(
        customer,
        shipping_service,
        shipping_fee_per_kg=config.shipping_fee_per_kg,
        currency_symbol=config.currency_symbol,
    )
    return order.checkout()


def main() -> None:
    # Settings are cached on first import; reload them after .env is applied
    load_dotenv()
    get_settings.cache_clear()
    config = get_settings()
    configure_logging(config)
    run_demo(config)


if __name__ == "__main__":
    main()
