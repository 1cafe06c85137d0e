"""
Domain failures raised by the data-access layer.

Route handlers catch these and translate them into HTTP status codes.
A missing row is never an error here: lookups return ``None`` instead.
"""


class StockTrackError(Exception):
    """Base class for every failure the services raise on purpose."""


class UniqueConstraintViolation(StockTrackError):
    """A write collided with a unique column (email, category name, sku)."""

    def __init__(self, field: str, value=None):
        self.field = field
        self.value = value
        message = f"{field} already exists"
        if value is not None:
            message = f"{field} '{value}' already exists"
        super().__init__(message)


class NoUpdatesProvided(StockTrackError):
    def __init__(self, message: str = "No valid updates provided"):
        super().__init__(message)


class CategoryInUse(StockTrackError):
    """Raised when deleting a category that inventory items still reference by name."""

    def __init__(self, name: str, item_count: int):
        self.name = name
        self.item_count = item_count
        super().__init__(
            f"Cannot delete category '{name}' because it is used by {item_count} inventory item(s)"
        )


def is_unique_violation(exc: Exception) -> bool:
    """Checks whether a store integrity error came from a unique constraint."""
    text = str(exc).lower()
    return "unique" in text or "duplicate" in text
