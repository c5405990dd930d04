from sqlalchemy.orm import Session
from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from typing import List, Optional
import logging

from barcode_inventory.models.category import Category
from barcode_inventory.models.product import Product
from barcode_inventory.services.exceptions import Conflict, InvalidInput, NotFound

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ("Uncategorized", "In Stock", "Stock Out")


class CategoryService:
    """
    Service class for Category operations.

    Products reference categories by name, so deletion is refused while any
    product still carries the category's name.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Category]:
        """Get all categories ordered by name."""
        return self.db.query(Category).order_by(Category.name.asc()).all()

    def get_by_id(self, category_id: int) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise NotFound("Category not found")
        return category

    def get_by_name(self, name: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.name == name).first()

    def create(self, name: Optional[str]) -> Category:
        """
        Create a new category.

        Args:
            name: Category name; surrounding whitespace is ignored

        Returns:
            Created category instance

        Raises:
            InvalidInput: If the name is empty
            Conflict: If a category with this exact name exists
        """
        name = (name or "").strip()
        if not name:
            raise InvalidInput("Category name is required")

        if self.get_by_name(name):
            raise Conflict("Category with this name already exists")

        category = Category(name=name)
        self.db.add(category)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity error creating category '{name}': {e}")
            raise Conflict("Category with this name already exists")
        self.db.refresh(category)

        logger.info(f"Category #{category.id} '{category.name}' created")
        return category

    def delete(self, category_id: int) -> Category:
        """
        Delete a category that no product uses.

        The in-use check and the delete run as one conditional statement, so a
        product filed under the category between the two cannot be orphaned
        by this call.

        Returns:
            The deleted category

        Raises:
            NotFound: If the category doesn't exist
            Conflict: If any product still uses the category
        """
        category = self.get_by_id(category_id)
        # Detach so the loaded fields stay readable once the row is gone
        self.db.expunge(category)

        in_use = exists().where(Product.category == category.name)
        result = self.db.execute(
            delete(Category)
            .where(Category.id == category_id)
            .where(~in_use)
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            self.db.rollback()
            if self.db.query(Category.id).filter(Category.id == category_id).first() is None:
                raise NotFound("Category not found")
            raise Conflict("Cannot delete category. It is being used by one or more products.")

        self.db.commit()
        logger.info(f"Category #{category_id} '{category.name}' deleted")
        return category

    def seed_defaults(self) -> List[str]:
        """
        Insert any missing default categories.

        Returns:
            Names of the categories that were created
        """
        logger.info("Seeding default categories...")
        existing = set(
            self.db.execute(
                select(Category.name).where(Category.name.in_(DEFAULT_CATEGORIES))
            ).scalars()
        )

        created = []
        for name in DEFAULT_CATEGORIES:
            if name in existing:
                logger.info(f"Category already exists: {name}")
                continue
            self.db.add(Category(name=name))
            created.append(name)
            logger.info(f"Created category: {name}")

        self.db.commit()
        logger.info("Category seeding completed")
        return created
