from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryCreate(BaseModel):
    """Schema for creating a category."""
    name: str = Field(..., max_length=100, description="Unique category name (e.g., Electronics).")
    description: Optional[str] = Field(None, description="Free-form description.")

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name is required")
        return v

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: Optional[str]) -> str:
        return v.strip() if v else ""


class CategoryUpdate(BaseModel):
    """Schema for a partial category update. Omitted fields are left untouched."""
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Category name must be a non-empty string")
        return v

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v is not None else v


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = ""
    created_at: datetime
    updated_at: datetime
