"""In-memory item catalog"""

import logging
from datetime import date, timedelta
from typing import Optional

from ..core.config import get_settings
from ..models.item import Item, utc_now

logger = logging.getLogger(__name__)

DEMO_SHELF_LIFE = timedelta(days=30)


def demo_items(today: Optional[date] = None) -> list[Item]:
    """
    Fresh instances of the demo catalog.

    Perishables expire a fixed shelf life after ``today`` (the current UTC
    date by default), so a freshly seeded catalog is always sellable.
    """
    if today is None:
        today = utc_now().date()
    expiry = today + DEMO_SHELF_LIFE
    return [
        Item(name="Cheese", price=100, quantity=5, expiry=expiry, weight=0.4),
        Item(name="Biscuits", price=150, quantity=2, expiry=expiry, weight=0.7),
        Item(name="TV", price=150, quantity=3, weight=7.0),
        Item(name="Mobile", price=200, quantity=10),
        Item(name="ScratchCard", price=50, quantity=20),
    ]


class CatalogDatabase:
    """In-memory catalog keyed by unique item name"""

    def __init__(self, items: Optional[list[Item]] = None):
        self.items: dict[str, Item] = {}
        if items is None:
            items = demo_items() if get_settings().seed_demo_data else []
        for item in items:
            self.add_item(item)

    def add_item(self, item: Item) -> Item:
        """Register an item; names are unique per catalog"""
        if item.name in self.items:
            raise ValueError(f"Item already in catalog: {item.name}")
        self.items[item.name] = item
        return item

    def get_item(self, name: str) -> Optional[Item]:
        """Get an item by name"""
        return self.items.get(name)

    def list_items(self, in_stock_only: bool = False) -> list[Item]:
        """List catalog items in registration order"""
        items = list(self.items.values())
        if in_stock_only:
            items = [item for item in items if item.available_quantity > 0]
        return items

    def reset(self, items: Optional[list[Item]] = None) -> None:
        """Replace the catalog contents, re-seeding the demo items by default"""
        self.items = {}
        for item in items if items is not None else demo_items():
            self.add_item(item)
        logger.info(f"Catalog reset with {len(self.items)} item(s)")


# Singleton instance
catalog_db = CatalogDatabase()
