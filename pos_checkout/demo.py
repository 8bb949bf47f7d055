#!/usr/bin/env python3
"""
Checkout walkthrough.

Replays a fixed set of shopping scenarios against a fresh demo catalog and
prints the shipment notices, receipts and errors they produce.
"""

import logging
from datetime import datetime, timezone

from .database.catalog import CatalogDatabase, demo_items
from .errors import CheckoutError
from .models.account import CustomerAccount
from .models.cart import Cart
from .services.checkout import CheckoutEngine

logger = logging.getLogger(__name__)

DEMO_NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def run_demo(now: datetime = DEMO_NOW) -> list[str]:
    """
    Run the walkthrough.

    Returns:
        Printed output blocks, in order
    """
    def clock():
        return now

    catalog = CatalogDatabase(demo_items(now.date()))
    customer = CustomerAccount(name="Ali", balance=1000)
    engine = CheckoutEngine(clock=clock)
    output: list[str] = []

    cheese = catalog.get_item("Cheese")
    biscuits = catalog.get_item("Biscuits")
    tv = catalog.get_item("TV")
    scratch_card = catalog.get_item("ScratchCard")

    # Zero TVs is rejected and stops the remaining adds
    cart = Cart(clock=clock)
    try:
        cart.add(cheese, 2)
        cart.add(biscuits, 1)
        cart.add(tv, 0)
        cart.add(scratch_card, 1)
    except CheckoutError as e:
        output.append(str(e))
    output.append(engine.checkout(customer, cart).render())

    # More cheese than is on the shelf
    cart = Cart(clock=clock)
    try:
        cart.add(cheese, 10)
    except CheckoutError as e:
        output.append(str(e))

    # Stock sells out between add and checkout
    cart.add(cheese, 1)
    cheese.reduce_quantity(cheese.available_quantity)
    output.append(engine.checkout(customer, cart).render())

    output.append(engine.checkout(customer, Cart(clock=clock)).render())
    return output


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s - %(message)s")
    for block in run_demo():
        print(block)
        print()


if __name__ == "__main__":
    main()
