from sqlalchemy import Column, Integer, BigInteger, String, DateTime

from barcode_inventory.database import Base, utcnow

DEFAULT_CATEGORY = "Uncategorized"


class Product(Base):
    """
    Product model representing a scanned inventory item.

    Attributes:
        id: Unique identifier for the product
        material: Internal material number (unique)
        barcode: Scanned barcode (EAN-13, EAN-8, UPC...), unique
        description: Product description
        category: Category name; a soft reference to Category.name, not a foreign key
        created_at: Timestamp when product was created
        updated_at: Timestamp when product was last updated
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    material = Column(BigInteger, nullable=False, unique=True, index=True)
    barcode = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(String(500), nullable=False)
    category = Column(String, nullable=False, default=DEFAULT_CATEGORY, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Product(id={self.id}, material={self.material}, barcode='{self.barcode}')>"
