"""Checkout API routes"""

from fastapi import APIRouter, Depends, HTTPException

from ..core.dependencies import get_checkout_engine
from ..database.accounts import account_db
from ..database.carts import cart_db
from ..models.checkout import CheckoutReport, CheckoutRequest
from ..services.checkout import CheckoutEngine

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("", response_model=CheckoutReport)
async def checkout(
    request: CheckoutRequest,
    engine: CheckoutEngine = Depends(get_checkout_engine),
):
    """
    Process checkout.

    Validation and payment failures are reported in the body with
    ``success=false``; only unknown carts or customers are HTTP errors.
    """
    cart = cart_db.get_cart(request.cart_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")

    account = account_db.get_account(request.customer)
    if account is None:
        raise HTTPException(status_code=404, detail="Customer not found")

    return engine.checkout(account, cart)
