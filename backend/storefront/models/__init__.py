from storefront.models.user import User
from storefront.models.category import Category
from storefront.models.user_category import UserCategory

__all__ = ["User", "Category", "UserCategory"]
