from tortoise import fields


class TimestampMixin:
    """Creation/modification timestamps shared by every table."""
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)
