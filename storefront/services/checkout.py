"""
Checkout service

Turns a customer's cart into a completed purchase. Every line is validated
and every figure computed before anything is mutated, so an aborted checkout
leaves the balance, the stock and the cart exactly as they were.
"""

import logging
import sys
from typing import Optional

from ..core.config import settings
from ..models.checkout import CheckoutResponse, CheckoutStatus
from ..models.customer import Customer
from ..models.product import Product
from .shipping import ShippingService

logger = logging.getLogger(__name__)


class Order:
    """Single checkout attempt for one customer"""

    def __init__(
        self,
        customer: Customer,
        shipping_service: ShippingService,
        shipping_fee_per_kg: Optional[float] = None,
        currency_symbol: Optional[str] = None,
    ):
        self.customer = customer
        self.shipping_service = shipping_service
        self.shipping_fee_per_kg = (
            settings.shipping_fee_per_kg if shipping_fee_per_kg is None else shipping_fee_per_kg
        )
        self.currency_symbol = settings.currency_symbol if currency_symbol is None else currency_symbol

    def _abort(
        self,
        status: CheckoutStatus,
        message: str,
        product_name: Optional[str] = None,
    ) -> CheckoutResponse:
        print(f"Error: {message}", file=sys.stderr)
        logger.warning(f"Checkout aborted for {self.customer.name}: {message}")
        return CheckoutResponse(
            success=False,
            status=status,
            product_name=product_name,
            error_message=message,
        )

    def _money(self, amount: float) -> str:
        return f"{self.currency_symbol}{amount:.2f}"

    def checkout(self) -> CheckoutResponse:
        """
        Process checkout.

        - Empty cart, short stock, expired products and insufficient balance
          abort with an error line and no side effects
        - On success the customer is debited, stock is reduced, shippable
          units are dispatched and the cart is cleared
        """
        cart = self.customer.cart
        if cart.is_empty():
            return self._abort(CheckoutStatus.EMPTY_CART, "Cart is empty.")

        subtotal = 0.0
        to_ship: list[Product] = []
        for item in cart.items:
            product = item.product

            # Stock may have dropped since the item was added
            if item.quantity > product.stock_quantity:
                return self._abort(
                    CheckoutStatus.OUT_OF_STOCK,
                    f"Product {product.name} out of stock or insufficient quantity.",
                    product.name,
                )

            if product.is_expirable and product.is_expired():
                return self._abort(
                    CheckoutStatus.EXPIRED,
                    f"Product {product.name} is expired.",
                    product.name,
                )

            subtotal += product.price * item.quantity

            if product.is_shippable:
                to_ship.extend([product] * item.quantity)

        shipping_fees = sum(p.weight for p in to_ship) * self.shipping_fee_per_kg
        paid_amount = subtotal + shipping_fees

        if self.customer.balance < paid_amount:
            return self._abort(CheckoutStatus.INSUFFICIENT_BALANCE, "Insufficient balance.")

        # Validation is complete; failures past this point are bugs and propagate
        self.customer.debit_balance(paid_amount)
        for item in cart.items:
            item.product.reduce_quantity(item.quantity)

        if to_ship:
            self.shipping_service.ship_items(to_ship)

        print("Checkout successful!")
        print(f"Order subtotal: {self._money(subtotal)}")
        print(f"Shipping fees: {self._money(shipping_fees)}")
        print(f"Paid amount: {self._money(paid_amount)}")
        print(f"Customer new balance: {self._money(self.customer.balance)}")

        logger.info(
            f"Checkout completed for {self.customer.name}: "
            f"{len(cart.items)} line(s), paid {paid_amount:.2f}"
        )
        cart.clear()

        return CheckoutResponse(
            success=True,
            status=CheckoutStatus.COMPLETED,
            subtotal=subtotal,
            shipping_fees=shipping_fees,
            paid_amount=paid_amount,
            new_balance=self.customer.balance,
            shipped_items=[p.name for p in to_ship],
        )
