from enum import Enum
from tortoise import fields, models
from stocktrack.models.base import TimestampMixin


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class User(TimestampMixin, models.Model):
    id = fields.IntField(primary_key=True)
    email = fields.CharField(max_length=255, unique=True)
    password_hash = fields.CharField(max_length=255)
    name = fields.CharField(max_length=255)
    role = fields.CharField(max_length=50, default=UserRole.USER.value)

    inventory_items: fields.ReverseRelation["InventoryItem"]

    class Meta:
        table = "users"

    def __str__(self):
        return self.email
