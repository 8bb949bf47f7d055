"""
POS Checkout

In-memory point-of-sale checkout: a catalog of perishable and/or shippable
items, a cart checked against live stock, and a checkout that settles
payment against a customer balance.
"""

from .errors import (
    CheckoutError,
    CheckoutOutcome,
    EmptyCart,
    ExpiredItem,
    InsufficientBalance,
    InsufficientStock,
    InvalidQuantity,
)
from .models import Cart, CheckoutReport, CustomerAccount, Item, ShippingUnit
from .services import CheckoutEngine, build_shipping_notice, checkout

__version__ = "1.0.0"

__all__ = [
    "CheckoutError",
    "CheckoutOutcome",
    "EmptyCart",
    "ExpiredItem",
    "InsufficientBalance",
    "InsufficientStock",
    "InvalidQuantity",
    "Cart",
    "CheckoutReport",
    "CustomerAccount",
    "Item",
    "ShippingUnit",
    "CheckoutEngine",
    "build_shipping_notice",
    "checkout",
]
