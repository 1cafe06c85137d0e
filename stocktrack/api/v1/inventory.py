import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from stocktrack.api.deps import get_session, parse_id
from stocktrack.core.errors import NoUpdatesProvided, UniqueConstraintViolation
from stocktrack.schemas.auth import SessionUser
from stocktrack.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
    InventoryStatsResponse,
)
from stocktrack.schemas.response import MessageResponse
from stocktrack.services.inventory_service import (
    create_inventory_item,
    delete_inventory_item,
    get_all_inventory_items,
    get_inventory_item_by_id,
    get_inventory_stats,
    search_inventory_items,
    update_inventory_item,
)

log = logging.getLogger("uvicorn")

router = APIRouter()


@router.get("")
async def list_inventory(
    stats: bool = False,
    search: Optional[str] = None,
    category: Optional[str] = None,
    mine: bool = False,
    session: SessionUser = Depends(get_session),
):
    """
    Lists inventory items, newest first.

    - `stats=true` returns the dashboard aggregates instead of items.
    - `search` / `category` narrow the list (substring match on name, sku, description).
    - `mine=true` restricts items and stats to the caller's own items.
    """
    owner_id = session.id if mine else None
    try:
        if stats:
            result = await get_inventory_stats(user_id=owner_id)
            return InventoryStatsResponse(
                total_items=result.total_items,
                total_value=result.total_value,
                low_stock_items=result.low_stock_items,
                categories=result.categories,
            )

        if search or category:
            items = await search_inventory_items(search or "", category=category, user_id=owner_id)
        else:
            items = await get_all_inventory_items(user_id=owner_id)
        return [InventoryItemResponse.model_validate(i) for i in items]
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to fetch inventory items") from e


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def create_inventory_endpoint(payload: InventoryItemCreate, session: SessionUser = Depends(get_session)):
    """Creates an item owned by the caller. Status is derived from quantity."""
    try:
        item = await create_inventory_item(payload.model_dump(), user_id=session.id)
        return InventoryItemResponse.model_validate(item)
    except UniqueConstraintViolation:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="SKU already exists")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to create inventory item") from e


@router.get("/{item_id}", response_model=InventoryItemResponse)
async def get_inventory_endpoint(item_id: str, session: SessionUser = Depends(get_session)):
    iid = parse_id(item_id, "item")
    try:
        item = await get_inventory_item_by_id(iid)
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to fetch inventory item") from e
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return InventoryItemResponse.model_validate(item)


@router.put("/{item_id}", response_model=InventoryItemResponse)
async def update_inventory_endpoint(
    item_id: str,
    payload: InventoryItemUpdate,
    session: SessionUser = Depends(get_session),
):
    iid = parse_id(item_id, "item")
    try:
        item = await update_inventory_item(iid, payload.model_dump(exclude_none=True))
    except NoUpdatesProvided as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UniqueConstraintViolation:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="SKU already exists")
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to update inventory item") from e
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    log.info(f"Inventory item {iid} updated by user {session.id}.")
    return InventoryItemResponse.model_validate(item)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_inventory_endpoint(item_id: str, session: SessionUser = Depends(get_session)):
    iid = parse_id(item_id, "item")
    try:
        deleted = await delete_inventory_item(iid)
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to delete inventory item") from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return MessageResponse(message="Item deleted successfully")
