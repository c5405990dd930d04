from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class CategoryCreate(BaseModel):
    """Schema for creating a new category."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, max_length=100, description="Category name (unique)")


class CategoryResponse(BaseModel):
    id: int
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryListResponse(BaseModel):
    """Schema for category list response, ordered by name."""
    count: int
    categories: list[CategoryResponse]


class CategoryDetailResponse(BaseModel):
    category: CategoryResponse


class CategoryMessageResponse(BaseModel):
    message: str
    category: CategoryResponse
