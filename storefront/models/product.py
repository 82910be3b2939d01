"""Product models for the storefront"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..core.exceptions import InsufficientStockError


class Product(BaseModel):
    """
    Product in the catalog.

    Expiry and shipping are independent traits: a product is expirable when
    it carries an ``expiry_date`` and shippable when it carries a ``weight``.
    Any combination is allowed. Everything except ``stock_quantity`` is fixed
    at construction.
    """
    name: str = Field(frozen=True, min_length=1)
    price: float = Field(ge=0, frozen=True)
    stock_quantity: int = Field(ge=0)
    expiry_date: Optional[date] = Field(default=None, frozen=True)
    weight: Optional[float] = Field(default=None, ge=0, frozen=True)  # kg

    @property
    def is_expirable(self) -> bool:
        return self.expiry_date is not None

    @property
    def is_shippable(self) -> bool:
        return self.weight is not None

    def is_expired(self, today: Optional[date] = None) -> bool:
        """True once today is strictly after the expiry date"""
        if self.expiry_date is None:
            return False
        today = today or date.today()
        return today > self.expiry_date

    def is_available(self, today: Optional[date] = None) -> bool:
        """In stock and, for expirable products, not expired"""
        return self.stock_quantity > 0 and not self.is_expired(today)

    def reduce_quantity(self, amount: int) -> None:
        """
        Remove stock after a sale.

        Raises:
            InsufficientStockError: amount exceeds the stock on hand
        """
        if amount > self.stock_quantity:
            raise InsufficientStockError(
                self.name,
                requested=amount,
                available=self.stock_quantity,
                message="Insufficient stock.",
            )
        self.stock_quantity -= amount
