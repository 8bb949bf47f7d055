# API Routes

from .items import router as items_router
from .cart import router as cart_router
from .checkout import router as checkout_router

__all__ = ["items_router", "cart_router", "checkout_router"]
