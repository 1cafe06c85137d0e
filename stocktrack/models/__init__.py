# stocktrack/models/__init__.py
from .user import User, UserRole
from .category import Category
from .inventory import InventoryItem, StockStatus

# Export all models
__all__ = [
    "Category",
    "InventoryItem",
    "StockStatus",
    "User",
    "UserRole",
]
