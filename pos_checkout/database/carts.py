"""Cart storage"""

import uuid
from typing import Optional

from ..models.cart import Cart
from ..models.item import Clock


class CartDatabase:
    """In-memory cart storage"""

    def __init__(self):
        self.carts: dict[str, Cart] = {}

    def create_cart(self, clock: Optional[Clock] = None) -> Cart:
        """Create a new empty cart"""
        cart = Cart(cart_id=str(uuid.uuid4()), clock=clock)
        self.carts[cart.cart_id] = cart
        return cart

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Get a cart by ID"""
        return self.carts.get(cart_id)

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            return True
        return False

    def reset(self) -> None:
        self.carts = {}


# Singleton instance
cart_db = CartDatabase()
