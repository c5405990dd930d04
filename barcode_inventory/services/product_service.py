from sqlalchemy.orm import Session
from sqlalchemy import delete, or_
from sqlalchemy.exc import IntegrityError
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Optional, List
import logging
import re

from barcode_inventory.database import utcnow
from barcode_inventory.models.product import Product, DEFAULT_CATEGORY
from barcode_inventory.schemas.product import ProductCreate
from barcode_inventory.services.exceptions import Conflict, InvalidInput, NotFound

logger = logging.getLogger(__name__)

DUPLICATE_PRODUCT = "Product with this material number or barcode already exists"
MAX_MATERIAL = 2**63 - 1
MAX_MATERIAL_DIGITS = 18

# Plain decimal notation, optionally signed and with an exponent
_NUMERIC_QUERY = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def parse_material_query(query: str) -> Optional[Decimal]:
    """
    Return the numeric value of a search query, or None when it is not a number.

    Any query that is entirely a number is treated as a material number search,
    including all-digit strings that could also be barcodes.
    """
    text = query.strip()
    if not _NUMERIC_QUERY.match(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def escape_like(value: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


class ProductService:
    """
    Service class for Product operations.

    This service handles:
    - Creating products (material number and barcode must both be unused)
    - Listing products, optionally by category
    - Searching by material number, barcode or description
    - Moving products between categories
    - Deleting products
    """

    def __init__(self, db: Session):
        self.db = db

    def _newest_first(self, query):
        return query.order_by(Product.created_at.desc(), Product.id.desc())

    def find_duplicate(self, material: int, barcode: str) -> Optional[Product]:
        """Find a product sharing either the material number or the barcode."""
        return (
            self.db.query(Product)
            .filter(or_(Product.material == material, Product.barcode == barcode))
            .first()
        )

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product instance

        Raises:
            Conflict: If the material number or barcode is already taken
        """
        if self.find_duplicate(product_data.material, product_data.barcode):
            raise Conflict(DUPLICATE_PRODUCT)

        now = utcnow()
        product = Product(
            material=product_data.material,
            barcode=product_data.barcode,
            description=product_data.description,
            category=product_data.category or DEFAULT_CATEGORY,
            created_at=now,
            updated_at=now,
        )
        self.db.add(product)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Unique constraint closes the race between the check above and the insert
            self.db.rollback()
            logger.warning(f"Integrity error creating product: {e}")
            raise Conflict(DUPLICATE_PRODUCT)
        self.db.refresh(product)

        logger.info(f"Product #{product.id} (material {product.material}) created")
        return product

    def get_by_id(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            NotFound: If no product has this ID
        """
        product = self.db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise NotFound("Product not found")
        return product

    def get_all(self, category: Optional[str] = None) -> List[Product]:
        """
        Get all products, newest first.

        Args:
            category: Optional exact category name to filter by
        """
        query = self.db.query(Product)
        if category:
            query = query.filter(Product.category == category)
        return self._newest_first(query).all()

    def search(self, query: Optional[str]) -> List[Product]:
        """
        Search products.

        A query that is entirely numeric is an exact material number match;
        anything else is a case-insensitive substring match on barcode or
        description. Barcodes are never searched for numeric queries.

        Raises:
            InvalidInput: If the query is empty
        """
        if not query or not query.strip():
            raise InvalidInput("Search query is required")

        material = parse_material_query(query)
        products = self.db.query(Product)

        if material is not None:
            # Material numbers are integers within the BIGINT range
            # adjusted() is checked first so huge exponents never hit context arithmetic
            if (
                material.adjusted() > MAX_MATERIAL_DIGITS
                or material != material.to_integral_value()
                or material.copy_abs() > MAX_MATERIAL
            ):
                return []
            products = products.filter(Product.material == int(material))
        else:
            pattern = f"%{escape_like(query)}%"
            products = products.filter(or_(
                Product.barcode.ilike(pattern, escape="\\"),
                Product.description.ilike(pattern, escape="\\"),
            ))

        return self._newest_first(products).all()

    def update_category(self, product_id: int, category: Optional[str]) -> Product:
        """
        Move a product to another category.

        The category name is not checked against stored categories.

        Raises:
            InvalidInput: If no category is given
            NotFound: If the product doesn't exist
        """
        category = (category or "").strip()
        if not category:
            raise InvalidInput("Category is required")

        product = self.get_by_id(product_id)

        now = utcnow()
        if product.updated_at is not None and now <= product.updated_at:
            now = product.updated_at + timedelta(microseconds=1)

        product.category = category
        product.updated_at = now
        self.db.commit()
        self.db.refresh(product)

        logger.info(f"Product #{product_id} moved to category '{category}'")
        return product

    def delete(self, product_id: int) -> Product:
        """
        Delete a product.

        Returns:
            The deleted product

        Raises:
            NotFound: If the product doesn't exist
        """
        product = self.get_by_id(product_id)
        # Detach so the loaded fields stay readable once the row is gone
        self.db.expunge(product)

        self.db.execute(
            delete(Product)
            .where(Product.id == product_id)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()

        logger.info(f"Product #{product_id} deleted")
        return product
