# Database modules

from .catalog import catalog_db, CatalogDatabase, demo_items
from .accounts import account_db, AccountDatabase
from .carts import cart_db, CartDatabase

__all__ = [
    "catalog_db",
    "CatalogDatabase",
    "demo_items",
    "account_db",
    "AccountDatabase",
    "cart_db",
    "CartDatabase",
]
