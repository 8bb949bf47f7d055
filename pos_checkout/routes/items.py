"""Catalog API routes"""

from fastapi import APIRouter, HTTPException, Query

from ..database.catalog import catalog_db
from ..models.item import Item

router = APIRouter(prefix="/api/items", tags=["Items"])


@router.get("", response_model=list[Item])
async def list_items(
    in_stock_only: bool = Query(False, description="Only show in-stock items"),
):
    """List catalog items"""
    return catalog_db.list_items(in_stock_only=in_stock_only)


@router.get("/{name}", response_model=Item)
async def get_item(name: str):
    """Get an item by name"""
    item = catalog_db.get_item(name)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item
