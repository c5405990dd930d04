from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from barcode_inventory.api.deps import get_current_user
from barcode_inventory.database import get_db
from barcode_inventory.services.analytics_service import AnalyticsService
from barcode_inventory.schemas.analytics import AnalyticsOverview, CategoryAnalytics

router = APIRouter(
    prefix="/analytics",
    tags=["Analytics"],
    dependencies=[Depends(get_current_user)]
)


@router.get(
    "",
    response_model=AnalyticsOverview,
    summary="Inventory overview",
    description="""
    Product totals, per-category counts and the ten most recently added products.

    Categories without products are listed with a count of 0. Category names
    used by products but missing from the category list are appended.
    """
)
def get_overview(db: Session = Depends(get_db)):
    return AnalyticsService(db).overview()


@router.get(
    "/categories",
    response_model=CategoryAnalytics,
    summary="Category detail",
    description="All products filed under one category name, newest first."
)
def get_category_analytics(
    category: Optional[str] = Query(None, description="Category name"),
    db: Session = Depends(get_db)
):
    return AnalyticsService(db).category_detail(category)
