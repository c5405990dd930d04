from sqlalchemy import Column, Integer, String, DateTime

from barcode_inventory.database import Base, utcnow


class Category(Base):
    """
    Category model: a uniquely named label that products are filed under.

    Products refer to categories by name only, so deleting a category
    never cascades.
    """
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
