from tortoise import fields, models
from stocktrack.models.base import TimestampMixin


class Category(TimestampMixin, models.Model):
    id = fields.IntField(primary_key=True)
    # Inventory items copy this name verbatim, there is no foreign key back here
    name = fields.CharField(max_length=100, unique=True)
    description = fields.TextField(null=True, default="")

    class Meta:
        table = "categories"

    def __str__(self):
        return self.name
