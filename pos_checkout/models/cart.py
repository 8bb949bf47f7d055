"""Cart models"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ExpiredItem, InsufficientStock, InvalidQuantity
from .item import Clock, Item, utc_now

logger = logging.getLogger(__name__)


class CartEntry(BaseModel):
    """Requested quantity of one catalog item"""

    model_config = ConfigDict(validate_assignment=True)

    item: Item
    quantity: int = Field(gt=0)

    @property
    def line_total(self) -> float:
        return self.item.price * self.quantity


class Cart:
    """
    Shopping cart accumulating quantities per item.

    Entries are keyed by item name and iterate in insertion order. Stock is
    only consumed at checkout, so adding never touches the catalog.
    """

    def __init__(self, cart_id: Optional[str] = None, clock: Optional[Clock] = None):
        self.cart_id = cart_id
        self.clock = clock or utc_now
        self._entries: dict[str, CartEntry] = {}

    def add(self, item: Item, quantity: int) -> CartEntry:
        """
        Add a quantity of an item to the cart.

        Repeated adds of the same item accumulate. The quantity is checked
        against the item's live stock only, not against what is already in
        the cart.

        Raises:
            InvalidQuantity: quantity is zero or negative
            ExpiredItem: the item is expired at the cart's clock time
            InsufficientStock: quantity exceeds the item's available stock
            ValueError: the cart already holds a different item with this name
        """
        if quantity <= 0:
            raise InvalidQuantity(quantity)
        if item.is_expired(self.clock()):
            raise ExpiredItem(item.name)
        if quantity > item.available_quantity:
            raise InsufficientStock(item.name, quantity, item.available_quantity)

        entry = self._entries.get(item.name)
        if entry is not None and entry.item is not item:
            raise ValueError(f"Cart already holds a different item named {item.name}")
        if entry is None:
            entry = CartEntry(item=item, quantity=quantity)
            self._entries[item.name] = entry
        else:
            entry.quantity += quantity

        logger.debug(f"Added {quantity}x {item.name} to cart (now {entry.quantity})")
        return entry

    @property
    def entries(self) -> list[CartEntry]:
        return list(self._entries.values())

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def quantity_of(self, name: str) -> int:
        entry = self._entries.get(name)
        return entry.quantity if entry else 0

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    item_name: str
    quantity: int = 1


class CartLine(BaseModel):
    """Cart entry as returned by the API"""
    item_name: str
    quantity: int
    unit_price: float
    line_total: float


class CartResponse(BaseModel):
    """Cart API response"""
    cart_id: str
    lines: list[CartLine] = []
    message: Optional[str] = None

    @classmethod
    def from_cart(cls, cart: Cart, message: Optional[str] = None) -> "CartResponse":
        lines = [
            CartLine(
                item_name=entry.item.name,
                quantity=entry.quantity,
                unit_price=entry.item.price,
                line_total=entry.line_total,
            )
            for entry in cart.entries
        ]
        return cls(cart_id=cart.cart_id or "", lines=lines, message=message)
