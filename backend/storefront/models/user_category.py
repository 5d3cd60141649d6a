from sqlalchemy import Column, Integer, ForeignKey
from storefront.core.database import Base


class UserCategory(Base):
    """
    Join row linking a user to a category they follow.

    The composite primary key keeps each (user, category) pair unique.
    """
    __tablename__ = "user_categories"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True)
