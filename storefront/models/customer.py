"""Customer model for the storefront"""

from pydantic import BaseModel, Field

from .cart import Cart
from ..core.exceptions import InsufficientBalanceError


class Customer(BaseModel):
    """Shopper with a cash balance and a single cart"""
    name: str = Field(frozen=True)
    balance: float = Field(ge=0)
    cart: Cart = Field(default_factory=Cart, frozen=True)

    def debit_balance(self, amount: float) -> None:
        """
        Take a payment out of the balance.

        Raises:
            InsufficientBalanceError: amount exceeds the current balance
        """
        if amount > self.balance:
            raise InsufficientBalanceError(amount, self.balance)
        self.balance -= amount
