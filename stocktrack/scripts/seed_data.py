# stocktrack/scripts/seed_data.py
import asyncio
import logging
from decimal import Decimal
from stocktrack.core.db import init_db, close_db
from stocktrack.core.security import hash_password
from stocktrack.models.category import Category
from stocktrack.models.inventory import InventoryItem
from stocktrack.models.user import User, UserRole
from stocktrack.services.inventory_service import stock_status

log = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "password"

SAMPLE_CATEGORIES = [
    ("Electronics", "Electronic devices and gadgets"),
    ("Furniture", "Office and home furniture"),
    ("Stationery", "Office supplies and stationery items"),
    ("Clothing", "Apparel and accessories"),
    ("Books", "Books and educational materials"),
    ("Home & Garden", "Home improvement and gardening supplies"),
    ("Sports", "Sports equipment and accessories"),
    ("Toys", "Toys and games"),
    ("Food & Beverages", "Food items and beverages"),
    ("Health & Beauty", "Health and beauty products"),
    ("Automotive", "Automotive parts and accessories"),
    ("Office Supplies", "General office supplies"),
]

# (name, sku, category, quantity, price, description)
SAMPLE_ITEMS = [
    ("Laptop Computer", "LAP-001", "Electronics", 25, "999.99", "High-performance laptop for business use"),
    ("Office Chair", "CHR-001", "Furniture", 15, "299.99", "Ergonomic office chair with lumbar support"),
    ("Wireless Mouse", "MSE-001", "Electronics", 50, "29.99", "Wireless optical mouse with USB receiver"),
    ("Desk Lamp", "LMP-001", "Furniture", 8, "79.99", "LED desk lamp with adjustable brightness"),
    ("Notebook", "NTB-001", "Stationery", 100, "4.99", "Spiral-bound notebook, 200 pages"),
]


async def seed():
    """Creates the admin user, sample categories and sample items. Safe to re-run."""
    admin, created = await User.get_or_create(
        email=ADMIN_EMAIL,
        defaults={
            "password_hash": hash_password(ADMIN_PASSWORD),
            "name": "Admin User",
            "role": UserRole.ADMIN.value,
        },
    )
    log.info(f"Admin user: {admin.id} ({'created' if created else 'existing'})")

    for name, description in SAMPLE_CATEGORIES:
        await Category.get_or_create(name=name, defaults={"description": description})
    log.info(f"Categories seeded: {len(SAMPLE_CATEGORIES)}")

    for name, sku, category, quantity, price, description in SAMPLE_ITEMS:
        await InventoryItem.get_or_create(
            sku=sku,
            defaults={
                "name": name,
                "category": category,
                "quantity": quantity,
                "price": Decimal(price),
                "description": description,
                "status": stock_status(quantity),
                "user": admin,
            },
        )
    log.info(f"Inventory items seeded: {len(SAMPLE_ITEMS)}")
    return admin


async def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    await init_db()
    await seed()
    await close_db()

if __name__ == "__main__":
    asyncio.run(main())
