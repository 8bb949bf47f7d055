"""FastAPI dependencies"""

from fastapi import Depends

from ..models.item import Clock, utc_now
from ..services.checkout import CheckoutEngine
from .config import get_settings


def get_clock() -> Clock:
    """Clock used to evaluate item expiry"""
    return utc_now


def get_checkout_engine(clock: Clock = Depends(get_clock)) -> CheckoutEngine:
    return CheckoutEngine(settings=get_settings(), clock=clock)
