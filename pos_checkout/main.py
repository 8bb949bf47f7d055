"""
POS Checkout Application

HTTP surface over the in-memory catalog, carts and checkout engine.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .core.config import get_settings
from .database.catalog import catalog_db
from .routes import items_router, cart_router, checkout_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("POS Checkout starting up...")
    logger.info(f"Catalog holds {len(catalog_db.items)} item(s)")
    yield
    logger.info("POS Checkout shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="In-memory point-of-sale checkout",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(items_router)
app.include_router(cart_router)
app.include_router(checkout_router)


@app.get("/")
async def home():
    return {
        "message": "POS Checkout API",
        "docs": "/docs",
        "endpoints": {
            "items": "/api/items",
            "cart": "/api/cart",
            "checkout": "/api/checkout",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "pos-checkout"}


def run():
    import uvicorn

    uvicorn.run(
        "pos_checkout.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
