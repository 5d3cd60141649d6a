from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from storefront.core.database import Base


class User(Base):
    """
    User model representing registered accounts.

    Passwords are stored as bcrypt hashes (never plaintext) and are never
    included in API responses.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    # Unique constraint is what settles two concurrent registrations for one email
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
