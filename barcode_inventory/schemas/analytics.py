from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional

from barcode_inventory.schemas.product import ProductResponse


class CategoryCount(BaseModel):
    name: str
    count: int


class RecentProduct(BaseModel):
    """Subset of product fields shown in the recent activity feed."""
    id: int
    material: int
    barcode: str
    description: str
    category: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RecentProducts(BaseModel):
    count: int
    products: list[RecentProduct]


class AnalyticsOverview(BaseModel):
    """
    Inventory overview.

    category_counts lists every stored category (name ascending, zero counts
    included) followed by category names that only appear on products.
    """
    total_products: int
    category_counts: list[CategoryCount]
    recent_products: RecentProducts


class CategorySummary(BaseModel):
    """A stored category, or a name-only placeholder when none exists."""
    id: Optional[int] = None
    name: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CategoryAnalytics(BaseModel):
    category: CategorySummary
    product_count: int
    products: list[ProductResponse]
