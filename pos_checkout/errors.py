"""Checkout error taxonomy"""

from enum import Enum
from typing import Optional


class CheckoutOutcome(str, Enum):
    SUCCESS = "success"
    EMPTY_CART = "empty_cart"
    EXPIRED_ITEM = "expired_item"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INSUFFICIENT_BALANCE = "insufficient_balance"


class CheckoutError(Exception):
    """Recoverable failure of a cart or checkout operation.

    Every failure leaves cart contents, stock and balance exactly as they
    were before the call.
    """

    outcome: Optional[CheckoutOutcome] = None

    def __init__(self, message: str, item_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.item_name = item_name


class InvalidQuantity(CheckoutError):
    """Requested quantity is zero or negative"""

    def __init__(self, quantity: int):
        super().__init__("Quantity must be positive")
        self.quantity = quantity


class ExpiredItem(CheckoutError):
    outcome = CheckoutOutcome.EXPIRED_ITEM

    def __init__(self, item_name: str):
        super().__init__(f"{item_name} is expired", item_name=item_name)


class InsufficientStock(CheckoutError):
    outcome = CheckoutOutcome.INSUFFICIENT_STOCK

    def __init__(self, item_name: str, requested: int, available: int):
        super().__init__(f"Not enough stock for {item_name}", item_name=item_name)
        self.requested = requested
        self.available = available


class EmptyCart(CheckoutError):
    outcome = CheckoutOutcome.EMPTY_CART

    def __init__(self):
        super().__init__("Cart is empty")


class InsufficientBalance(CheckoutError):
    outcome = CheckoutOutcome.INSUFFICIENT_BALANCE

    def __init__(self, balance: float, total: float):
        super().__init__("Insufficient balance")
        self.balance = balance
        self.total = total
