from enum import Enum
from tortoise import fields, models
from stocktrack.models.base import TimestampMixin


class StockStatus(str, Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"      # 0 < quantity < LOW_STOCK_THRESHOLD
    OUT_OF_STOCK = "Out of Stock"


class InventoryItem(TimestampMixin, models.Model):
    id = fields.IntField(primary_key=True)
    name = fields.CharField(max_length=255)
    sku = fields.CharField(max_length=100, unique=True)
    # Denormalized copy of Category.name
    category = fields.CharField(max_length=100, db_index=True)
    quantity = fields.IntField(default=0)
    price = fields.DecimalField(max_digits=10, decimal_places=2, default=0)
    description = fields.TextField(null=True, default="")
    status = fields.CharEnumField(StockStatus, max_length=50, default=StockStatus.IN_STOCK)
    user = fields.ForeignKeyField("models.User", related_name="inventory_items", on_delete=fields.CASCADE)

    class Meta:
        table = "inventory_items"
        indexes = [
            ("user_id",),                # Owner scoped listings and stats
        ]

    def __str__(self):
        return f"{self.name} ({self.sku})"
