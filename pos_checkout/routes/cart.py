"""Cart API routes"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..core.dependencies import get_clock
from ..database.carts import cart_db
from ..database.catalog import catalog_db
from ..errors import CheckoutError
from ..models.cart import AddToCartRequest, CartResponse
from ..models.item import Clock

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.post("", response_model=CartResponse)
async def create_cart(clock: Clock = Depends(get_clock)):
    """Create a new shopping cart"""
    cart = cart_db.create_cart(clock=clock)
    return CartResponse.from_cart(cart, message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str):
    """Get cart by ID"""
    cart = cart_db.get_cart(cart_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")
    return CartResponse.from_cart(cart)


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(cart_id: str, request: AddToCartRequest):
    """Add an item to the cart"""
    cart = cart_db.get_cart(cart_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")

    item = catalog_db.get_item(request.item_name)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")

    try:
        cart.add(item, request.quantity)
    except CheckoutError as e:
        logger.info(f"Rejected add of {request.quantity}x {item.name}: {e}")
        raise HTTPException(status_code=400, detail=e.message)

    return CartResponse.from_cart(
        cart,
        message=f"Added {request.quantity}x {item.name} to cart",
    )
