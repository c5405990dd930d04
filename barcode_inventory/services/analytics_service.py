from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Optional

from barcode_inventory.models.category import Category
from barcode_inventory.models.product import Product
from barcode_inventory.schemas.analytics import (
    AnalyticsOverview,
    CategoryAnalytics,
    CategoryCount,
    CategorySummary,
    RecentProduct,
    RecentProducts,
)
from barcode_inventory.schemas.product import ProductResponse
from barcode_inventory.services.exceptions import InvalidInput

RECENT_PRODUCTS_LIMIT = 10


class AnalyticsService:
    """
    Read-only aggregates over products and categories.

    Products refer to categories by name, so counts are joined on name
    equality and recomputed on every call.
    """

    def __init__(self, db: Session):
        self.db = db

    def overview(self) -> AnalyticsOverview:
        """
        Compute the inventory overview.

        Category counts follow stored categories by name (zero when unused),
        then any category names that exist only on products, largest first.
        """
        grouped = (
            self.db.query(Product.category, func.count(Product.id).label("count"))
            .group_by(Product.category)
            .order_by(func.count(Product.id).desc(), Product.category.asc())
            .all()
        )
        counts = {name: count for name, count in grouped}

        category_names = [
            name for (name,) in self.db.query(Category.name).order_by(Category.name.asc())
        ]
        category_counts = [
            CategoryCount(name=name, count=counts.get(name, 0)) for name in category_names
        ]

        known = set(category_names)
        category_counts.extend(
            CategoryCount(name=name, count=count)
            for name, count in grouped
            if name not in known
        )

        recent = (
            self.db.query(Product)
            .order_by(Product.created_at.desc(), Product.id.desc())
            .limit(RECENT_PRODUCTS_LIMIT)
            .all()
        )

        return AnalyticsOverview(
            # Derived from the grouping so the counts always add up to the total
            total_products=sum(counts.values()),
            category_counts=category_counts,
            recent_products=RecentProducts(
                count=len(recent),
                products=[RecentProduct.model_validate(p) for p in recent],
            ),
        )

    def category_detail(self, name: Optional[str]) -> CategoryAnalytics:
        """
        Products filed under one category name.

        Raises:
            InvalidInput: If no category name is given
        """
        if not name or not name.strip():
            raise InvalidInput("Category parameter is required")

        products = (
            self.db.query(Product)
            .filter(Product.category == name)
            .order_by(Product.created_at.desc(), Product.id.desc())
            .all()
        )
        category = self.db.query(Category).filter(Category.name == name).first()

        return CategoryAnalytics(
            category=(
                CategorySummary.model_validate(category)
                if category
                else CategorySummary(name=name)
            ),
            product_count=len(products),
            products=[ProductResponse.model_validate(p) for p in products],
        )
