# Checkout Models

from .checkout import (
    CheckoutOutcome,
    CheckoutReport,
    CheckoutRequest,
    Receipt,
    ReceiptLine,
    ShippingNotice,
    ShippingNoticeLine,
)
from .item import Clock, Item, ShippingUnit, utc_now
from .account import CustomerAccount
from .cart import Cart, CartEntry, AddToCartRequest, CartLine, CartResponse

__all__ = [
    "CheckoutOutcome",
    "CheckoutReport",
    "CheckoutRequest",
    "Receipt",
    "ReceiptLine",
    "ShippingNotice",
    "ShippingNoticeLine",
    "Clock",
    "Item",
    "ShippingUnit",
    "utc_now",
    "CustomerAccount",
    "Cart",
    "CartEntry",
    "AddToCartRequest",
    "CartLine",
    "CartResponse",
]
