# python -m storefront.scripts.seed_categories [NAME ...]

import logging
import sys
from storefront.core.database import SessionLocal, create_tables
from storefront.services.preference_service import preference_service

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    "Electronics",
    "Fashion",
    "Home & Kitchen",
    "Books",
    "Sports & Outdoors",
    "Beauty",
    "Toys & Games",
    "Groceries",
]


def seed_categories(names=None) -> int:
    """Insert any missing categories and return how many exist afterwards"""
    create_tables()
    db = SessionLocal()
    try:
        seeded = [preference_service.create_category(db, name) for name in (names or DEFAULT_CATEGORIES)]
        return len(seeded)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    count = seed_categories(sys.argv[1:] or None)
    logger.info(f"{count} categories seeded")
