import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional

from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q, RawSQL

from stocktrack.core.config import LOW_STOCK_THRESHOLD
from stocktrack.core.errors import NoUpdatesProvided, UniqueConstraintViolation, is_unique_violation
from stocktrack.models.inventory import InventoryItem, StockStatus

log = logging.getLogger(__name__)

# Columns a client may write. Status is never in here; it follows quantity.
INVENTORY_CREATE_FIELDS = ("name", "sku", "category", "quantity", "price", "description")
INVENTORY_REQUIRED_FIELDS = ("name", "sku", "category", "quantity", "price")
INVENTORY_UPDATABLE_FIELDS = frozenset(INVENTORY_CREATE_FIELDS)

NEWEST_FIRST = ("-created_at", "-id")


@dataclass(frozen=True)
class InventoryStats:
    total_items: int
    total_value: Decimal
    low_stock_items: int
    categories: int


def stock_status(quantity: int) -> StockStatus:
    """Derives the stock status of an item from its quantity."""
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity < LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def _owned_by(user_id: Optional[int]):
    if user_id is None:
        return InventoryItem.all()
    return InventoryItem.filter(user_id=user_id)


async def get_all_inventory_items(user_id: Optional[int] = None) -> List[InventoryItem]:
    """Returns every item, newest first, optionally only those owned by user_id."""
    return await _owned_by(user_id).order_by(*NEWEST_FIRST)


async def get_inventory_item_by_id(item_id: int) -> Optional[InventoryItem]:
    return await InventoryItem.get_or_none(id=item_id)


async def create_inventory_item(fields: Dict[str, Any], user_id: int) -> InventoryItem:
    """
    Inserts a new item owned by user_id and returns the persisted row.
    The status column is computed here from quantity, whatever the caller sent.
    """
    data = {k: fields[k] for k in INVENTORY_CREATE_FIELDS if fields.get(k) is not None}
    missing = [k for k in INVENTORY_REQUIRED_FIELDS if k not in data]
    if missing:
        raise ValueError(f"Missing required fields: {', '.join(missing)}")

    data.setdefault("description", "")
    data["status"] = stock_status(data["quantity"])

    try:
        item = await InventoryItem.create(user_id=user_id, **data)
    except IntegrityError as e:
        if is_unique_violation(e):
            raise UniqueConstraintViolation("sku", data["sku"]) from e
        raise

    log.info(f"Inventory item {item.id} ({item.sku}) created by user {user_id}.")
    return item


async def update_inventory_item(item_id: int, updates: Dict[str, Any]) -> Optional[InventoryItem]:
    """
    Applies a partial update. Keys outside INVENTORY_UPDATABLE_FIELDS and None
    values are dropped before anything is written. Changing quantity also
    rewrites status, and updated_at is refreshed on every successful call.
    """
    fields = {k: v for k, v in updates.items() if k in INVENTORY_UPDATABLE_FIELDS and v is not None}
    if not fields:
        raise NoUpdatesProvided()

    if "quantity" in fields:
        fields["status"] = stock_status(fields["quantity"])

    item = await InventoryItem.get_or_none(id=item_id)
    if not item:
        return None

    item.update_from_dict(fields)
    try:
        await item.save(update_fields=[*fields, "updated_at"])
    except IntegrityError as e:
        if is_unique_violation(e):
            raise UniqueConstraintViolation("sku", fields.get("sku")) from e
        raise

    return item


async def delete_inventory_item(item_id: int) -> bool:
    deleted = await InventoryItem.filter(id=item_id).delete()
    return deleted > 0


async def search_inventory_items(
    term: str,
    category: Optional[str] = None,
    user_id: Optional[int] = None,
) -> List[InventoryItem]:
    """
    Case-insensitive substring search over name, sku and description.
    category and user_id, when given, narrow the result further.
    """
    query = InventoryItem.filter(
        Q(name__icontains=term) | Q(sku__icontains=term) | Q(description__icontains=term)
    )
    if category:
        query = query.filter(category=category)
    if user_id is not None:
        query = query.filter(user_id=user_id)
    return await query.order_by(*NEWEST_FIRST)


async def get_inventory_stats(user_id: Optional[int] = None) -> InventoryStats:
    """
    Dashboard aggregates. These are four separate queries without a shared
    transaction, so concurrent writes can leave the numbers mutually stale.
    """
    items = _owned_by(user_id)

    total_items = await items.count()

    # Summed in the database; SUM over no rows is NULL
    totals = await items.annotate(total=RawSQL("SUM(quantity * price)")).values_list("total", flat=True)
    total = totals[0] if totals else None
    total_value = Decimal(str(total)) if total is not None else Decimal("0")

    low_stock_items = await items.filter(quantity__lt=LOW_STOCK_THRESHOLD).count()

    categories = await items.distinct().values_list("category", flat=True)

    return InventoryStats(
        total_items=total_items,
        total_value=total_value.quantize(Decimal("0.01")),
        low_stock_items=low_stock_items,
        categories=len(categories),
    )
