# Checkout services

from .checkout import CheckoutEngine, Pricing, checkout
from .receipt import display_amount, render_receipt
from .shipping import build_shipping_notice, render_shipping_notice, shipping_cost

__all__ = [
    "CheckoutEngine",
    "Pricing",
    "checkout",
    "display_amount",
    "render_receipt",
    "build_shipping_notice",
    "render_shipping_notice",
    "shipping_cost",
]
