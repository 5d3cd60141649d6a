import logging
from typing import Iterable, List, Tuple
from sqlalchemy.orm import Session
from storefront.core.exceptions import ValidationError
from storefront.models.category import Category
from storefront.models.user_category import UserCategory

logger = logging.getLogger(__name__)


class PreferenceService:
    """Service for the categories a user follows"""

    @staticmethod
    def list_categories_for_user(db: Session, user_id: int) -> List[Tuple[Category, bool]]:
        """
        Return every category paired with whether the user follows it.
        Ordered by category id.
        """
        associated_ids = PreferenceService.get_associated_ids(db, user_id)
        categories = db.query(Category).order_by(Category.id).all()
        return [(category, category.id in associated_ids) for category in categories]

    @staticmethod
    def get_associated_ids(db: Session, user_id: int) -> set:
        rows = db.query(UserCategory.category_id).filter(UserCategory.user_id == user_id).all()
        return {row.category_id for row in rows}

    @staticmethod
    def replace_associations(db: Session, user_id: int, category_ids: Iterable[int]) -> set:
        """
        Replace the user's categories with exactly ``category_ids``.

        The delete and the inserts are committed together, so readers see
        either the old set or the new one. Duplicate ids collapse. Unknown
        ids raise ValidationError and leave the previous set in place.
        """
        if isinstance(category_ids, (str, bytes, dict)) or not isinstance(category_ids, Iterable):
            raise ValidationError("activeCategoryIds must be an array")

        wanted = set()
        for category_id in category_ids:
            if isinstance(category_id, bool) or not isinstance(category_id, int):
                raise ValidationError(
                    "activeCategoryIds must contain category ids",
                    details={"value": category_id},
                )
            wanted.add(category_id)

        if wanted:
            known = {
                row.id for row in db.query(Category.id).filter(Category.id.in_(wanted))
            }
            unknown = wanted - known
            if unknown:
                raise ValidationError(
                    "Unknown category ids",
                    details={"category_ids": sorted(unknown)},
                )

        try:
            db.query(UserCategory).filter(UserCategory.user_id == user_id).delete(
                synchronize_session=False
            )
            db.add_all(UserCategory(user_id=user_id, category_id=category_id) for category_id in wanted)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"User {user_id} now follows {len(wanted)} categories")
        return wanted

    @staticmethod
    def create_category(db: Session, name: str) -> Category:
        """Create a category, or return the existing one with that name"""
        existing = db.query(Category).filter(Category.name == name).first()
        if existing:
            return existing

        category = Category(name=name)
        db.add(category)
        db.commit()
        db.refresh(category)
        return category


preference_service = PreferenceService()
