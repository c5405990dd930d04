from sqlalchemy import Column, Integer, String, DateTime

from barcode_inventory.database import Base, utcnow


class User(Base):
    """
    User account able to sign in to the inventory.

    Attributes:
        id: Unique identifier for the user
        name: Display name
        email: Login email (unique, stored lower-cased)
        password_hash: Salted password hash; the plain password is never stored
        created_at: Timestamp when the user registered
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
