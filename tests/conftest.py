"""Shared fixtures: a fixed evaluation clock and fresh catalog items."""

from datetime import date, datetime, timezone

import pytest

from pos_checkout.core.config import Settings
from pos_checkout.models.account import CustomerAccount
from pos_checkout.models.cart import Cart
from pos_checkout.models.item import Item
from pos_checkout.services.checkout import CheckoutEngine

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
BEST_BEFORE = date(2025, 12, 31)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def settings():
    return Settings(shipping_increment_grams=100, shipping_rate_per_increment=3.0)


@pytest.fixture
def engine(settings, clock):
    return CheckoutEngine(settings=settings, clock=clock)


@pytest.fixture
def cart(clock):
    return Cart(clock=clock)


@pytest.fixture
def customer():
    return CustomerAccount(name="Ali", balance=1000)


@pytest.fixture
def cheese():
    return Item(name="Cheese", price=100, quantity=5, expiry=BEST_BEFORE, weight=0.4)


@pytest.fixture
def biscuits():
    return Item(name="Biscuits", price=150, quantity=2, expiry=BEST_BEFORE, weight=0.7)


@pytest.fixture
def tv():
    return Item(name="TV", price=150, quantity=3, weight=7.0)


@pytest.fixture
def mobile():
    return Item(name="Mobile", price=200, quantity=10)


@pytest.fixture
def scratch_card():
    return Item(name="ScratchCard", price=50, quantity=20)


@pytest.fixture
def spoiled_milk():
    return Item(name="Milk", price=30, quantity=4, expiry=date(2025, 5, 1), weight=1.0)
