from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    model_config = ConfigDict(str_strip_whitespace=True)

    material: int = Field(..., ge=0, le=2**63 - 1, description="Material number (unique)")
    barcode: str = Field(..., min_length=1, max_length=100, description="Product barcode (unique)")
    description: str = Field(..., min_length=1, max_length=500, description="Product description")


class ProductCreate(ProductBase):
    """Schema for creating a new product, usually from a scanned barcode."""
    category: Optional[str] = Field(
        None, description="Category name, defaults to 'Uncategorized'"
    )


class ProductCategoryUpdate(BaseModel):
    """Schema for moving a product to another category."""
    model_config = ConfigDict(str_strip_whitespace=True)

    category: Optional[str] = Field(None, description="New category name")


class ProductResponse(ProductBase):
    """Schema for product response including all fields."""
    id: int
    category: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Schema for product list response."""
    count: int
    products: list[ProductResponse]


class ProductSearchResponse(ProductListResponse):
    """Schema for search results, echoing the query."""
    query: str


class ProductDetailResponse(BaseModel):
    product: ProductResponse


class ProductMessageResponse(BaseModel):
    """Schema for write operations: a status message plus the affected product."""
    message: str
    product: ProductResponse
