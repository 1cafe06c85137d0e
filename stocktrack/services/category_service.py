import logging
from typing import Any, Dict, List, Optional

from tortoise.exceptions import IntegrityError

from stocktrack.core.errors import CategoryInUse, NoUpdatesProvided, UniqueConstraintViolation, is_unique_violation
from stocktrack.models.category import Category
from stocktrack.models.inventory import InventoryItem

log = logging.getLogger(__name__)

CATEGORY_UPDATABLE_FIELDS = frozenset({"name", "description"})


async def get_all_categories() -> List[Category]:
    return await Category.all().order_by("-created_at", "-id")


async def get_category_by_id(category_id: int) -> Optional[Category]:
    return await Category.get_or_none(id=category_id)


async def create_category(name: str, description: str = "") -> Category:
    try:
        category = await Category.create(name=name, description=description or "")
    except IntegrityError as e:
        if is_unique_violation(e):
            raise UniqueConstraintViolation("name", name) from e
        raise
    log.info(f"Category {category.id} '{category.name}' created.")
    return category


async def update_category(category_id: int, updates: Dict[str, Any]) -> Optional[Category]:
    """Partial update restricted to CATEGORY_UPDATABLE_FIELDS; refreshes updated_at."""
    fields = {k: v for k, v in updates.items() if k in CATEGORY_UPDATABLE_FIELDS and v is not None}
    if not fields:
        raise NoUpdatesProvided()

    category = await Category.get_or_none(id=category_id)
    if not category:
        return None

    category.update_from_dict(fields)
    try:
        await category.save(update_fields=[*fields, "updated_at"])
    except IntegrityError as e:
        if is_unique_violation(e):
            raise UniqueConstraintViolation("name", fields.get("name")) from e
        raise
    return category


async def delete_category(category_id: int) -> bool:
    """
    Deletes a category unless an inventory item still carries its name.

    Items reference categories by a copied name rather than a foreign key, so
    the usage check is a separate query and not atomic with the delete.
    """
    category = await Category.get_or_none(id=category_id)
    if not category:
        return False

    in_use = await InventoryItem.filter(category=category.name).count()
    if in_use:
        raise CategoryInUse(category.name, in_use)

    deleted = await Category.filter(id=category_id).delete()
    if deleted:
        log.info(f"Category {category_id} '{category.name}' deleted.")
    return deleted > 0
