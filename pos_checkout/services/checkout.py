"""Checkout engine: validation, pricing and settlement of a cart"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.config import Settings, get_settings
from ..errors import (
    CheckoutError,
    CheckoutOutcome,
    EmptyCart,
    ExpiredItem,
    InsufficientBalance,
    InsufficientStock,
)
from ..models.account import CustomerAccount
from ..models.cart import Cart
from ..models.checkout import CheckoutReport, Receipt, ReceiptLine
from ..models.item import Clock, ShippingUnit, utc_now
from .receipt import render_receipt
from .shipping import build_shipping_notice, render_shipping_notice, shipping_cost

logger = logging.getLogger(__name__)


@dataclass
class Pricing:
    """Amounts computed once per checkout and reused for check and debit"""
    subtotal: float = 0.0
    total_weight: float = 0.0
    shipping: float = 0.0
    total: float = 0.0
    units: list[ShippingUnit] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)


class CheckoutEngine:
    """
    Settles a cart against a customer account.

    The sequence is validate -> price -> affordability check -> settle.
    Nothing is mutated before the affordability check passes, and the debit,
    stock decrements and cart clearing then happen together.
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None):
        self.settings = settings or get_settings()
        self.clock = clock or utc_now

    def checkout(self, account: CustomerAccount, cart: Cart) -> CheckoutReport:
        """
        Check out a cart.

        Args:
            account: Customer paying for the order
            cart: Cart to settle; cleared only on success

        Returns:
            Report carrying the outcome, and on success the receipt and the
            shipment notice (when the order has shippable items)
        """
        try:
            self.validate(cart, self.clock())
            pricing = self.price(cart)
            if not account.can_afford(pricing.total):
                raise InsufficientBalance(account.balance, pricing.total)
        except CheckoutError as e:
            logger.warning(f"Checkout for {account.name} failed: {e}")
            return CheckoutReport(
                success=False,
                outcome=e.outcome,
                item_name=e.item_name,
                error_message=e.message,
            )

        return self._settle(account, cart, pricing)

    def validate(self, cart: Cart, now: datetime) -> None:
        """Re-check every entry against the item's current expiry and stock"""
        if cart.is_empty:
            raise EmptyCart()

        for entry in cart.entries:
            item = entry.item
            if item.is_expired(now):
                raise ExpiredItem(item.name)
            if entry.quantity > item.available_quantity:
                raise InsufficientStock(item.name, entry.quantity, item.available_quantity)

    def price(self, cart: Cart) -> Pricing:
        """Compute subtotal, shippable units and shipping cost"""
        pricing = Pricing()
        for entry in cart.entries:
            item = entry.item
            pricing.subtotal += item.price * entry.quantity
            if item.is_shippable:
                unit = item.shipping_unit()
                pricing.units.extend([unit] * entry.quantity)
                pricing.counts[item.name] = entry.quantity
                pricing.total_weight += unit.weight * entry.quantity

        pricing.shipping = shipping_cost(pricing.total_weight, self.settings)
        pricing.total = pricing.subtotal + pricing.shipping
        return pricing

    def _settle(self, account: CustomerAccount, cart: Cart, pricing: Pricing) -> CheckoutReport:
        notice = None
        notice_text = None
        if pricing.units:
            notice = build_shipping_notice(pricing.units, pricing.counts)
            notice_text = render_shipping_notice(notice)

        lines = [
            ReceiptLine(
                quantity=entry.quantity,
                item_name=entry.item.name,
                line_total=entry.line_total,
            )
            for entry in cart.entries
        ]

        total = pricing.total
        account.debit(total)

        receipt = Receipt(
            lines=lines,
            subtotal=pricing.subtotal,
            shipping=pricing.shipping,
            total=total,
            balance=account.balance,
        )

        for entry in cart.entries:
            entry.item.reduce_quantity(entry.quantity)
        cart.clear()

        logger.info(
            f"Checkout for {account.name} completed: {len(lines)} line(s), "
            f"total {total}, remaining balance {account.balance}"
        )

        return CheckoutReport(
            success=True,
            outcome=CheckoutOutcome.SUCCESS,
            receipt=receipt,
            shipping_notice=notice,
            receipt_text=render_receipt(receipt),
            shipping_notice_text=notice_text,
        )


def checkout(account: CustomerAccount, cart: Cart) -> CheckoutReport:
    """Check out a cart with default settings, evaluating expiry at the cart's clock"""
    return CheckoutEngine(clock=cart.clock).checkout(account, cart)
