from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from stocktrack.models.inventory import StockStatus


class InventoryItemCreate(BaseModel):
    """Schema for creating an inventory item. Status is always derived from quantity."""
    name: str = Field(..., max_length=255, description="Display name of the item (e.g., Laptop Computer).")
    sku: str = Field(..., max_length=100, description="Unique stock-keeping unit (e.g., LAP-001).")
    category: str = Field(..., max_length=100, description="Name of the category the item belongs to.")
    quantity: int = Field(..., ge=0, description="Units currently on hand.")
    price: Decimal = Field(..., ge=0, description="Unit price.")
    description: Optional[str] = Field(None, description="Optional notes about the item.")

    @field_validator("name", "sku", "category")
    @classmethod
    def required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Missing required fields")
        return v


class InventoryItemUpdate(BaseModel):
    """Schema for a partial item update. Only the fields sent are written."""
    name: Optional[str] = Field(None, max_length=255)
    sku: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    quantity: Optional[int] = Field(None, ge=0)
    price: Optional[Decimal] = Field(None, ge=0)
    description: Optional[str] = None

    @field_validator("name", "sku", "category")
    @classmethod
    def text_not_blank(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError(f"Item {info.field_name} must be a non-empty string")
        return v


class InventoryItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    sku: str
    category: str
    quantity: int
    price: float
    description: Optional[str] = ""
    status: StockStatus
    created_at: datetime
    updated_at: datetime
    user_id: int


class InventoryStatsResponse(BaseModel):
    """Dashboard aggregates, serialized with the camelCase keys clients expect."""
    total_items: int = Field(..., serialization_alias="totalItems")
    total_value: float = Field(..., serialization_alias="totalValue")
    low_stock_items: int = Field(..., serialization_alias="lowStockItems")
    categories: int
